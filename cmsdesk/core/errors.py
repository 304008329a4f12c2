"""
Collection Errors
=================

Typed rejections raised by the collection core. Every one of them is
recoverable at the point of the user action; blueprints turn them into
JSON responses with the matching HTTP status.
"""


class CollectionError(Exception):
    """Base class for rejected collection operations"""

    status_code = 400

    def __init__(self, message, record_id=None, field=None):
        super().__init__(message)
        self.message = message
        self.record_id = record_id
        self.field = field

    def to_dict(self):
        data = {'success': False, 'error': self.message, 'error_type': type(self).__name__}
        if self.record_id is not None:
            data['id'] = self.record_id
        if self.field is not None:
            data['field'] = self.field
        return data


class ValidationError(CollectionError):
    """A required field is missing or a value is not allowed"""

    status_code = 400


class ProtectedRecordError(CollectionError):
    """Delete or deactivate attempted on a default or self-referential record"""

    status_code = 409


class NotFoundError(CollectionError):
    """No record with the given id exists in the collection"""

    status_code = 404


class PermissionDeniedError(CollectionError):
    """The acting identity lacks the capability for this screen"""

    status_code = 403
