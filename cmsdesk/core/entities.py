"""
Entity Schemas
==============

One schema per managed entity. A schema is the exhaustive field set of a
record plus the rules the collection core needs: which fields are required,
searchable or filterable, which values a status may take, whether records
carry a display order, an active flag or a default/home designation.
"""

import copy
from datetime import datetime

from .errors import ValidationError

SECRET_MASK = '********'

_TRUE_STRINGS = ('1', 'true', 'yes', 'on')
_FALSE_STRINGS = ('0', 'false', 'no', 'off', '')


def _to_bool(field, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValidationError(f"'{field}' must be true or false", field=field)


def _to_int(field, value):
    if isinstance(value, bool):
        raise ValidationError(f"'{field}' must be a whole number", field=field)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"'{field}' must be a whole number", field=field)


def _to_list(field, value):
    if isinstance(value, (list, tuple)):
        return [str(item) if item is not None else '' for item in value]
    raise ValidationError(f"'{field}' must be a list", field=field)


_COERCERS = {
    bool: _to_bool,
    int: _to_int,
    list: _to_list,
}


class EntitySchema:
    """Describes one entity type managed by a collection"""

    def __init__(self, name, label, fields, required=(), create_required=(),
                 search_fields=(), filter_fields=(), choices=None, field_types=None,
                 ranges=None, list_fields=(), secret_fields=(), hashed_fields=(), upload_fields=(),
                 orderable=False, active_field=None, active_values=None,
                 inactive_statuses=(), default_field=None, self_protected=False,
                 created_field=None, modified_field=None, timestamp_format='%Y-%m-%d',
                 sort_field=None, sort_descending=False):
        self.name = name
        self.label = label
        self.fields = dict(fields)
        self.required = tuple(required)
        self.create_required = tuple(create_required)
        self.search_fields = tuple(search_fields)
        self.filter_fields = tuple(filter_fields)
        self.choices = dict(choices or {})
        self.field_types = dict(field_types or {})
        self.ranges = dict(ranges or {})
        self.list_fields = tuple(list_fields)
        self.secret_fields = tuple(secret_fields)
        # secrets stored as a one-way hash
        self.hashed_fields = tuple(hashed_fields)
        self.upload_fields = tuple(upload_fields)
        self.orderable = orderable
        self.order_field = 'display_order'
        self.active_field = active_field
        # (active, inactive) for status-valued flags; None means a plain bool
        self.active_values = active_values
        self.inactive_statuses = tuple(inactive_statuses)
        self.default_field = default_field
        self.self_protected = self_protected
        self.created_field = created_field
        self.modified_field = modified_field
        self.timestamp_format = timestamp_format
        self.sort_field = sort_field
        self.sort_descending = sort_descending

        for field in self.list_fields:
            self.field_types.setdefault(field, list)
        if self.orderable:
            self.fields.setdefault(self.order_field, None)
            self.field_types.setdefault(self.order_field, int)
        if self.default_field:
            self.fields.setdefault(self.default_field, False)
            self.field_types.setdefault(self.default_field, bool)
        if self.active_field and self.active_values is None:
            self.field_types.setdefault(self.active_field, bool)

    def __repr__(self):
        return f"<EntitySchema {self.name}>"

    @property
    def status_field(self):
        return 'status' if 'status' in self.choices else None

    def defaults(self):
        """Fresh copy of every field's default value"""
        return copy.deepcopy(self.fields)

    def now_stamp(self, now=None):
        return (now or datetime.now()).strftime(self.timestamp_format)

    def has_field(self, field):
        return field in self.fields

    def clean(self, field, value):
        """Validate and coerce one field value"""
        if field not in self.fields:
            raise ValidationError(f"Unknown field '{field}' for {self.label}", field=field)

        if value is None:
            if field in self.choices:
                raise ValidationError(f"'{field}' is required for {self.label}", field=field)
            return None

        coercer = _COERCERS.get(self.field_types.get(field))
        if coercer:
            value = coercer(field, value)
        elif isinstance(value, str):
            value = value.strip() if field not in self.secret_fields else value

        allowed = self.choices.get(field)
        if allowed is not None and value not in allowed:
            raise ValidationError(
                f"'{value}' is not a valid {field} for {self.label} (expected one of {', '.join(allowed)})",
                field=field,
            )

        bounds = self.ranges.get(field)
        if bounds is not None:
            low, high = bounds
            if (low is not None and value < low) or (high is not None and value > high):
                raise ValidationError(f"'{field}' must be between {low} and {high}", field=field)

        return value

    def clean_fields(self, values):
        return {field: self.clean(field, value) for field, value in values.items()}

    def missing_required(self, record, creating=False):
        """Names of required fields that are empty in ``record``"""
        names = self.required + (self.create_required if creating else ())
        missing = []
        for field in names:
            value = record.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field)
        return missing

    def is_blank_secret(self, field, value):
        """An empty or masked secret means 'keep the stored value'"""
        if field not in self.secret_fields:
            return False
        if value is None:
            return True
        value = str(value)
        return not value.strip() or set(value) == {'*'}

    def is_protected(self, record):
        return bool(self.default_field and record.get(self.default_field))

    def is_active(self, record):
        if not self.active_field:
            return True
        value = record.get(self.active_field)
        if self.active_values:
            return value == self.active_values[0]
        return bool(value)

    def deactivates(self, status):
        """Whether setting ``status`` takes a record out of service"""
        if self.active_values and self.active_field == 'status' and status == self.active_values[1]:
            return True
        return status in self.inactive_statuses

    def serialize(self, record):
        """Copy of ``record`` safe to hand to a client, secrets masked"""
        data = copy.deepcopy(record)
        for field in self.secret_fields:
            if field in data:
                data[field] = SECRET_MASK if data[field] else ''
        return data


# ============================================
# Pages
# ============================================

PAGE = EntitySchema(
    name='pages',
    label='page',
    fields={
        'name': '',
        'url': '',
        'status': 'draft',
        'title': '',
        'content': '',
        'meta_title': '',
        'meta_description': '',
        'featured_image': None,
        'last_modified': None,
    },
    required=('name', 'url'),
    search_fields=('name', 'url', 'title'),
    choices={'status': ('draft', 'published', 'archived')},
    upload_fields=('featured_image',),
    default_field='is_home',
    modified_field='last_modified',
    timestamp_format='%Y-%m-%d %H:%M',
)


# ============================================
# Form submissions (leads)
# ============================================

SUBMISSION = EntitySchema(
    name='submissions',
    label='form submission',
    fields={
        'name': '',
        'email': '',
        'phone': '',
        'form_type': 'Contact',
        'message': '',
        'datetime': None,
        'status': 'new',
        'source': '',
    },
    required=('name', 'email'),
    search_fields=('name', 'email', 'phone'),
    filter_fields=('form_type', 'source'),
    choices={
        'status': ('new', 'read', 'converted'),
        'form_type': ('Contact', 'Quote Request', 'Newsletter', 'Other'),
    },
    created_field='datetime',
    timestamp_format='%Y-%m-%d %H:%M',
    sort_field='datetime',
    sort_descending=True,
)


# ============================================
# Blog posts
# ============================================

POST = EntitySchema(
    name='posts',
    label='blog post',
    fields={
        'title': '',
        'content': '',
        'excerpt': '',
        'featured_image': None,
        'publish_date': None,
        'status': 'draft',
        'meta_title': '',
        'meta_description': '',
    },
    required=('title',),
    search_fields=('title', 'excerpt'),
    choices={'status': ('draft', 'published', 'archived')},
    upload_fields=('featured_image',),
    created_field='publish_date',
    sort_field='publish_date',
    sort_descending=True,
)


# ============================================
# Orderable content: testimonials, team, services
# ============================================

TESTIMONIAL = EntitySchema(
    name='testimonials',
    label='testimonial',
    fields={
        'client_name': '',
        'company': '',
        'testimonial': '',
        'rating': 5,
        'photo': None,
        'is_active': True,
    },
    required=('client_name', 'testimonial'),
    search_fields=('client_name', 'company', 'testimonial'),
    filter_fields=('is_active', 'rating'),
    field_types={'rating': int},
    ranges={'rating': (1, 5)},
    upload_fields=('photo',),
    orderable=True,
    active_field='is_active',
)

TEAM_MEMBER = EntitySchema(
    name='team',
    label='team member',
    fields={
        'name': '',
        'position': '',
        'bio': '',
        'photo': None,
        'is_active': True,
    },
    required=('name', 'position'),
    search_fields=('name', 'position', 'bio'),
    filter_fields=('is_active',),
    upload_fields=('photo',),
    orderable=True,
    active_field='is_active',
)

SERVICE = EntitySchema(
    name='services',
    label='service',
    fields={
        'name': '',
        'description': '',
        'short_description': '',
        'price': '',
        'features': [],
        'is_active': True,
        'category': '',
    },
    required=('name',),
    search_fields=('name', 'short_description', 'category'),
    filter_fields=('category', 'is_active'),
    list_fields=('features',),
    orderable=True,
    active_field='is_active',
)


# ============================================
# Users
# ============================================

ROLES = ('super_admin', 'admin', 'editor')

ROLE_DESCRIPTIONS = {
    'super_admin': 'Full access to everything including user management and system settings',
    'admin': 'Content management, form submissions, cannot manage users or sites',
    'editor': 'Limited content editing, can view form submissions',
}

USER = EntitySchema(
    name='users',
    label='user',
    fields={
        'name': '',
        'email': '',
        'password': '',
        'role': 'editor',
        'status': 'active',
        'sites_access': ['main-site'],
        'last_login': 'Never',
    },
    required=('name', 'email'),
    create_required=('password',),
    search_fields=('name', 'email'),
    filter_fields=('role',),
    choices={'role': ROLES, 'status': ('active', 'inactive')},
    list_fields=('sites_access',),
    secret_fields=('password',),
    hashed_fields=('password',),
    active_field='status',
    active_values=('active', 'inactive'),
    self_protected=True,
)


# ============================================
# Sites
# ============================================

SITE = EntitySchema(
    name='sites',
    label='site',
    fields={
        'name': '',
        'domain': '',
        'description': '',
        'status': 'active',
        'created_at': None,
        'last_modified': None,
        'pages': 0,
        'visits': 0,
        'leads': 0,
        'custom_domain': '',
        'seo_title': '',
        'seo_description': '',
        'analytics_id': '',
        'favicon_url': None,
    },
    required=('name', 'domain'),
    search_fields=('name', 'domain', 'description'),
    choices={'status': ('active', 'inactive', 'maintenance')},
    field_types={'pages': int, 'visits': int, 'leads': int},
    upload_fields=('favicon_url',),
    active_field='status',
    active_values=('active', 'inactive'),
    default_field='is_default',
    created_field='created_at',
    modified_field='last_modified',
)


# ============================================
# Settings sections (single-record collections)
# ============================================

GENERAL_SETTINGS = EntitySchema(
    name='general',
    label='general settings',
    fields={
        'site_name': 'CMS Dashboard',
        'admin_email': 'admin@example.com',
        'company_logo': None,
        'time_zone': 'America/New_York',
        'date_format': 'MM/DD/YYYY',
    },
    required=('site_name', 'admin_email'),
    choices={'date_format': ('MM/DD/YYYY', 'DD/MM/YYYY', 'YYYY-MM-DD')},
    upload_fields=('company_logo',),
)

EMAIL_SETTINGS = EntitySchema(
    name='email',
    label='email settings',
    fields={
        'smtp_host': 'smtp.gmail.com',
        'smtp_port': 587,
        'smtp_username': '',
        'smtp_password': '',
        'use_ssl': True,
        'notification_email': 'admin@example.com',
        'email_from_name': 'CMS Dashboard',
    },
    required=('smtp_host', 'smtp_port'),
    field_types={'smtp_port': int, 'use_ssl': bool},
    ranges={'smtp_port': (1, 65535)},
    secret_fields=('smtp_password',),
)

SECURITY_SETTINGS = EntitySchema(
    name='security',
    label='security settings',
    fields={
        'require_two_factor': False,
        'session_timeout': 60,
        'max_login_attempts': 5,
        'password_min_length': 8,
        'require_password_complexity': True,
    },
    field_types={
        'require_two_factor': bool,
        'session_timeout': int,
        'max_login_attempts': int,
        'password_min_length': int,
        'require_password_complexity': bool,
    },
    ranges={
        'session_timeout': (5, 1440),
        'max_login_attempts': (1, 100),
        'password_min_length': (6, 128),
    },
)

SETTINGS_SECTIONS = {
    'general': GENERAL_SETTINGS,
    'email': EMAIL_SETTINGS,
    'security': SECURITY_SETTINGS,
}

ENTITIES = {
    schema.name: schema
    for schema in (PAGE, SUBMISSION, POST, TESTIMONIAL, TEAM_MEMBER, SERVICE, USER, SITE)
}
