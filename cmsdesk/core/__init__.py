"""
CMSDesk Core
============

Collection stores, projections, mutations and the shared services every
screen module builds on.
"""

from .collection import CollectionStore
from .config import Config
from .errors import CollectionError, NotFoundError, PermissionDeniedError, ProtectedRecordError, ValidationError
from .form_binding import FormBinding
from .logging_service import LoggingService, logger

__all__ = [
    'CollectionStore', 'Config', 'FormBinding', 'LoggingService', 'logger',
    'CollectionError', 'ValidationError', 'ProtectedRecordError', 'NotFoundError', 'PermissionDeniedError',
]
