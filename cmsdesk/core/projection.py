"""
Filter/Sort Projection
======================

Pure functions deriving the displayed list from a collection and the
current filter criteria. Inputs are never modified.
"""

from datetime import datetime, timedelta

from .errors import ValidationError

ALL = ('', 'all', None)

PERIODS = ('today', 'week', 'month', 'last30')

_DATE_FORMATS = ('%Y-%m-%d %H:%M:%S', '%Y-%m-%d %H:%M', '%Y-%m-%d')


def _matches_search(record, fields, term):
    for field in fields:
        value = record.get(field)
        if value is not None and term in str(value).lower():
            return True
    return False


def build_predicate(criteria=None, schema=None):
    """Turn a criteria dict into a single record -> bool predicate

    Recognised keys: ``status`` (equality, 'all' disables), ``search``
    (case-insensitive substring across the schema's search fields) and
    any of the schema's filter fields (equality). All are ANDed.
    """
    criteria = dict(criteria or {})
    checks = []

    status = criteria.pop('status', None)
    if status not in ALL:
        checks.append(lambda r, s=status: r.get('status') == s)

    search = criteria.pop('search', None)
    if search and str(search).strip():
        term = str(search).strip().lower()
        fields = schema.search_fields if schema else ()
        checks.append(lambda r, t=term, f=fields: _matches_search(r, f, t))

    for field, value in criteria.items():
        if value in ALL:
            continue
        if schema is not None:
            if field not in schema.filter_fields:
                raise ValidationError(f"Cannot filter {schema.label} records by '{field}'", field=field)
            value = schema.clean(field, value)
        checks.append(lambda r, f=field, v=value: r.get(f) == v)

    return lambda record: all(check(record) for check in checks)


def sort_records(records, schema):
    """Stable sort by display order (orderable) or by the schema's sort field"""
    if schema is None:
        return list(records)
    if schema.orderable:
        field = schema.order_field
        return sorted(records, key=lambda r: (r.get(field) is None, r.get(field) or 0))
    if schema.sort_field:
        field = schema.sort_field
        present = [r for r in records if r.get(field)]
        missing = [r for r in records if not r.get(field)]
        return sorted(present, key=lambda r: str(r.get(field)), reverse=schema.sort_descending) + missing
    return list(records)


def project(records, criteria=None, schema=None):
    """Filtered, sorted view of ``records``; same inputs give the same output"""
    predicate = build_predicate(criteria, schema)
    return sort_records([r for r in records if predicate(r)], schema)


def active_only(records, schema):
    """Records whose active flag is set, in display order"""
    return sort_records([r for r in records if schema.is_active(r)], schema)


def parse_timestamp(value):
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(str(value), fmt)
        except ValueError:
            continue
    return None


def period_start(period, now=None):
    """Start of a dashboard time window relative to ``now``"""
    now = now or datetime.now()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == 'today':
        return today
    if period == 'week':
        return today - timedelta(days=today.weekday())
    if period == 'month':
        return today.replace(day=1)
    if period == 'last30':
        return today - timedelta(days=30)
    raise ValidationError(f"Unknown period '{period}' (expected one of {', '.join(PERIODS)})", field='period')


def within_period(records, field, period, now=None):
    """Records whose ``field`` timestamp falls inside ``period``"""
    if period in ALL:
        return list(records)
    now = now or datetime.now()
    start = period_start(period, now)
    selected = []
    for record in records:
        stamp = parse_timestamp(record.get(field))
        if stamp is not None and start <= stamp <= now:
            selected.append(record)
    return selected


def count_by(records, field):
    """Occurrences of each value of ``field``, in first-seen order"""
    counts = {}
    for record in records:
        key = record.get(field)
        counts[key] = counts.get(key, 0) + 1
    return counts
