"""
Collection Store
================

In-memory, ordered list of records of one entity type. The store never
edits a list in place: every change installs a new list and bumps
``version`` so observers can tell that something changed.
"""

import copy
import threading

from . import mutations
from .errors import ValidationError


class CollectionStore:
    """Source of truth for one management screen"""

    def __init__(self, schema, records=()):
        self.schema = schema
        self._lock = threading.RLock()
        self._records = []
        self.version = 0
        if records:
            self.set_all(records)

    def __len__(self):
        return len(self._records)

    def __repr__(self):
        return f"<CollectionStore {self.schema.name} ({len(self._records)} records, v{self.version})>"

    @property
    def records(self):
        """Current list value. Records are shared, never edit them in place."""
        return list(self._records)

    def snapshot(self):
        """Deep copy of the current list"""
        return copy.deepcopy(self._records)

    def get(self, record_id):
        """Deep copy of one record, or NotFoundError"""
        with self._lock:
            index = mutations.index_of(self._records, record_id)
            return copy.deepcopy(self._records[index])

    def find_default(self):
        field = self.schema.default_field
        if not field:
            return None
        for record in self._records:
            if record.get(field):
                return copy.deepcopy(record)
        return None

    def set_all(self, new_list):
        """Install ``new_list`` as the collection contents"""
        new_list = list(new_list)
        ids = [r.get('id') for r in new_list]
        if any(not isinstance(i, str) or not i for i in ids):
            raise ValidationError(f"Every {self.schema.label} needs a string id")
        if len(set(ids)) != len(ids):
            raise ValidationError(f"Duplicate {self.schema.label} ids")
        if self.schema.default_field:
            defaults = [r for r in new_list if r.get(self.schema.default_field)]
            if len(defaults) > 1:
                raise ValidationError(f"Only one default {self.schema.label} is allowed")

        with self._lock:
            if new_list != self._records:
                self._records = new_list
                self.version += 1
            return self.records

    def apply(self, operation, *args, **kwargs):
        """Run a mutation function against the current list and install the result"""
        with self._lock:
            result = operation(self._records, self.schema, *args, **kwargs)
            if result is self._records:
                return self.records
            return self.set_all(result)

    def add(self, record):
        """Create a record from field values; returns the new list"""
        return self.apply(mutations.create_record, record)

    def update(self, record_id, patch, actor_id=None):
        return self.apply(mutations.update_record, record_id, patch, actor_id=actor_id)

    def remove(self, record_id, actor_id=None):
        """Delete by id; ProtectedRecordError for the default/home record"""
        return self.apply(mutations.delete_record, record_id, actor_id=actor_id)

    def toggle_active(self, record_id, actor_id=None):
        return self.apply(mutations.toggle_active, record_id, actor_id=actor_id)

    def set_status(self, record_id, status, actor_id=None):
        return self.apply(mutations.set_status, record_id, status, actor_id=actor_id)

    def move_up(self, record_id):
        return self.apply(mutations.move_up, record_id)

    def move_down(self, record_id):
        return self.apply(mutations.move_down, record_id)

    def set_default(self, record_id):
        return self.apply(mutations.set_default, record_id)
