"""
Form Binding
============

Transient edit buffer for one record. Opening a binding copies the record,
so nothing typed into the form reaches the Collection Store until commit.
"""

import copy

from .errors import ValidationError

IDLE = 'idle'
CREATE = 'create'
EDIT = 'edit'


class FormBinding:
    """Edit buffer for a create or edit flow"""

    def __init__(self, schema, buffer, record_id=None):
        self.schema = schema
        self.buffer = buffer
        self.record_id = record_id
        self.mode = EDIT if record_id is not None else CREATE

    @classmethod
    def for_create(cls, schema, initial=None):
        binding = cls(schema, schema.defaults())
        if schema.default_field:
            binding.buffer.pop(schema.default_field, None)
        if initial:
            binding.set_fields(initial)
        return binding

    @classmethod
    def for_edit(cls, schema, record):
        buffer = copy.deepcopy(record)
        record_id = buffer.pop('id')
        if schema.default_field:
            buffer.pop(schema.default_field, None)
        for field in schema.secret_fields:
            if field in buffer:
                buffer[field] = ''
        return cls(schema, buffer, record_id=record_id)

    def __repr__(self):
        return f"<FormBinding {self.schema.name} {self.mode}>"

    @property
    def is_open(self):
        return self.mode != IDLE

    def _ensure_open(self):
        if not self.is_open:
            raise ValidationError("This form is closed")

    def _list_field(self, field):
        self._ensure_open()
        if field not in self.schema.list_fields:
            raise ValidationError(f"'{field}' is not a list field", field=field)
        return self.buffer.setdefault(field, [])

    def set_field(self, field, value):
        """Replace one named field's value"""
        self._ensure_open()
        if not self.schema.has_field(field) or field == self.schema.default_field:
            raise ValidationError(f"Unknown field '{field}' for {self.schema.label}", field=field)
        self.buffer[field] = copy.deepcopy(value)

    def set_fields(self, values):
        for field, value in values.items():
            self.set_field(field, value)

    def add_item(self, field, value=''):
        self._list_field(field).append(value)

    def update_item(self, field, index, value):
        items = self._list_field(field)
        if not 0 <= index < len(items):
            raise ValidationError(f"No entry {index} in '{field}'", field=field)
        items[index] = value

    def remove_item(self, field, index):
        items = self._list_field(field)
        if not 0 <= index < len(items):
            raise ValidationError(f"No entry {index} in '{field}'", field=field)
        del items[index]

    def validate(self):
        """Check field values and required fields without touching the store"""
        self._ensure_open()
        cleaned = {}
        for field, value in self.buffer.items():
            if self.schema.is_blank_secret(field, value) and self.mode == EDIT:
                continue
            cleaned[field] = self.schema.clean(field, value)
        missing = self.schema.missing_required(
            dict(self.schema.defaults(), **cleaned), creating=self.mode == CREATE)
        if missing:
            raise ValidationError(
                f"Please fill in all required fields: {', '.join(missing)}", field=missing[0])
        return cleaned

    def commit(self, store, actor_id=None):
        """Reconcile the buffer into ``store``; returns the stored record"""
        self._ensure_open()
        self.validate()
        if self.mode == CREATE:
            records = store.add(self.buffer)
            record = copy.deepcopy(records[-1])
        else:
            store.update(self.record_id, self.buffer, actor_id=actor_id)
            record = store.get(self.record_id)
        self.mode = IDLE
        return record

    def cancel(self):
        """Discard the buffer; the store is untouched"""
        self.buffer = {}
        self.mode = IDLE
