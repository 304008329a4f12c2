"""
Mutation Operations
===================

Create, update, delete, toggle-active, reorder, set-status and set-default
for any entity schema. Every function takes the current list of records and
returns a new list; neither the input list nor any record in it is modified.
Rejections are raised as typed CollectionErrors.
"""

import threading
import time

from .errors import NotFoundError, ProtectedRecordError, ValidationError
from .identity import hash_password


class IdSequence:
    """Time-based record ids that strictly increase within the process"""

    def __init__(self, clock=None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


new_id = IdSequence()


def index_of(records, record_id):
    """Position of ``record_id`` in ``records`` or NotFoundError"""
    for i, record in enumerate(records):
        if record.get('id') == record_id:
            return i
    raise NotFoundError(f"No record with id '{record_id}'", record_id=record_id)


def _order_value(schema, record):
    value = record.get(schema.order_field)
    return float('inf') if value is None else value


def ranked_positions(records, schema):
    """Indexes of ``records`` in display order (stable on ties)"""
    return sorted(range(len(records)), key=lambda i: _order_value(schema, records[i]))


def _strip_blank_items(schema, values):
    for field in schema.list_fields:
        if values.get(field) is not None:
            values[field] = [item for item in values[field] if item.strip()]


def _hash_secrets(schema, values):
    for field in schema.hashed_fields:
        if values.get(field):
            values[field] = hash_password(values[field])


def _require(schema, record, creating=False):
    missing = schema.missing_required(record, creating=creating)
    if missing:
        raise ValidationError(
            f"Please fill in all required fields: {', '.join(missing)}",
            field=missing[0],
        )


def _is_self(schema, record_id, actor_id):
    return schema.self_protected and actor_id is not None and record_id == actor_id


def _check_deactivation(schema, record, actor_id):
    if schema.is_protected(record):
        raise ProtectedRecordError(
            f"Cannot deactivate the default {schema.label}", record_id=record['id'])
    if _is_self(schema, record['id'], actor_id):
        raise ProtectedRecordError(
            f"You cannot deactivate your own {schema.label} account", record_id=record['id'])


def create_record(records, schema, values, id_factory=None, now=None):
    """Append a new record built from ``values`` and schema defaults"""
    values = dict(values)
    if 'id' in values:
        raise ValidationError("New records cannot choose their own id", field='id')
    if schema.default_field:
        values.pop(schema.default_field, None)

    record = schema.defaults()
    record.update(schema.clean_fields(values))
    _strip_blank_items(schema, record)
    _require(schema, record, creating=True)
    _hash_secrets(schema, record)

    if schema.orderable and record.get(schema.order_field) is None:
        orders = [r.get(schema.order_field) for r in records if r.get(schema.order_field) is not None]
        record[schema.order_field] = max(orders) + 1 if orders else 1

    stamp = schema.now_stamp(now)
    if schema.created_field and not record.get(schema.created_field):
        record[schema.created_field] = stamp
    if schema.modified_field:
        record[schema.modified_field] = stamp

    id_factory = id_factory or new_id
    existing = {r.get('id') for r in records}
    record_id = id_factory()
    while record_id in existing:
        record_id = id_factory()

    return list(records) + [dict({'id': record_id}, **record)]


def update_record(records, schema, record_id, values, actor_id=None, now=None):
    """Replace the record with ``record_id`` by a copy merged with ``values``

    Fields absent from ``values`` keep their stored value, and so do secret
    fields whose submitted value is blank or masked.
    """
    index = index_of(records, record_id)
    current = records[index]

    changes = {}
    for field, value in values.items():
        if field == 'id':
            if value != record_id:
                raise ValidationError("Record ids cannot be changed", record_id=record_id, field='id')
            continue
        if field == schema.default_field:
            if bool(value) != bool(current.get(field)):
                raise ValidationError(
                    f"Use set-default to change the default {schema.label}", record_id=record_id, field=field)
            continue
        if schema.is_blank_secret(field, value):
            continue
        changes[field] = schema.clean(field, value)

    _strip_blank_items(schema, changes)
    _hash_secrets(schema, changes)

    if schema.active_values is None and schema.active_field in changes:
        if schema.is_active(current) and not changes[schema.active_field]:
            _check_deactivation(schema, current, actor_id)
    status = changes.get('status')
    if status is not None and schema.deactivates(status) and status != current.get('status'):
        _check_deactivation(schema, current, actor_id)

    merged = dict(current, **changes)
    _require(schema, merged)
    if schema.modified_field and changes:
        merged[schema.modified_field] = schema.now_stamp(now)

    updated = list(records)
    updated[index] = merged
    return updated


def delete_record(records, schema, record_id, actor_id=None):
    """Drop the record with ``record_id`` unless it is protected"""
    index = index_of(records, record_id)
    record = records[index]
    if schema.is_protected(record):
        raise ProtectedRecordError(f"Cannot delete the default {schema.label}", record_id=record_id)
    if _is_self(schema, record_id, actor_id):
        raise ProtectedRecordError(f"You cannot delete your own {schema.label} account", record_id=record_id)
    return [r for r in records if r.get('id') != record_id]


def toggle_active(records, schema, record_id, actor_id=None, now=None):
    """Flip the active flag of one record, leaving every other field alone"""
    if not schema.active_field:
        raise ValidationError(f"{schema.label.capitalize()} records have no active flag")

    index = index_of(records, record_id)
    record = records[index]
    currently_active = schema.is_active(record)
    if currently_active:
        _check_deactivation(schema, record, actor_id)

    if schema.active_values:
        active, inactive = schema.active_values
        value = inactive if currently_active else active
    else:
        value = not currently_active

    toggled = dict(record, **{schema.active_field: value})
    if schema.modified_field:
        toggled[schema.modified_field] = schema.now_stamp(now)

    updated = list(records)
    updated[index] = toggled
    return updated


def set_status(records, schema, record_id, status, actor_id=None, now=None):
    """Move one record to any status its schema allows"""
    if not schema.status_field:
        raise ValidationError(f"{schema.label.capitalize()} records have no status")
    if status in (None, ''):
        raise ValidationError("Please choose a status", record_id=record_id, field='status')
    return update_record(records, schema, record_id, {'status': status}, actor_id=actor_id, now=now)


def _move(records, schema, record_id, step):
    if not schema.orderable:
        raise ValidationError(f"{schema.label.capitalize()} records cannot be reordered")

    index = index_of(records, record_id)
    ranked = ranked_positions(records, schema)
    position = ranked.index(index) + step
    if position < 0 or position >= len(ranked):
        return records

    other = ranked[position]
    mover, neighbour = records[index], records[other]
    updated = list(records)
    if _order_value(schema, mover) == _order_value(schema, neighbour):
        # equal ranks sort by list position
        updated[index], updated[other] = neighbour, mover
    else:
        field = schema.order_field
        updated[index] = dict(mover, **{field: neighbour.get(field)})
        updated[other] = dict(neighbour, **{field: mover.get(field)})
    return updated


def move_up(records, schema, record_id):
    """Swap display order with the next-lower ranked record; no-op at the top"""
    return _move(records, schema, record_id, -1)


def move_down(records, schema, record_id):
    """Swap display order with the next-higher ranked record; no-op at the bottom"""
    return _move(records, schema, record_id, 1)


def set_default(records, schema, record_id):
    """Make ``record_id`` the only record carrying the default flag"""
    if not schema.default_field:
        raise ValidationError(f"{schema.label.capitalize()} records have no default")

    index_of(records, record_id)
    field = schema.default_field
    updated = []
    for record in records:
        flag = record.get('id') == record_id
        updated.append(record if bool(record.get(field)) == flag else dict(record, **{field: flag}))
    return updated
