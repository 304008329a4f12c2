"""
Centralized logging service for CMSDesk.
Keeps structured log entries in a bounded in-memory buffer (nothing is
persisted) and mirrors every entry to the standard ``cmsdesk`` logger.
"""

import json
import logging
import threading
from collections import deque
from datetime import datetime
from flask import request, has_request_context, session
from .config import Config

_std_logger = logging.getLogger('cmsdesk')


class LoggingService:
    """Centralized logging service for application-wide logging"""

    _entries = deque(maxlen=Config.LOG_BUFFER_SIZE)
    _lock = threading.Lock()
    _next_id = 1

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        try:
            ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
            if ip_address and ',' in ip_address:
                ip_address = ip_address.split(',')[0].strip()

            user_agent = request.headers.get('User-Agent', '')
            request_path = request.path

            return ip_address, user_agent, request_path
        except Exception:
            return None, None, None

    @staticmethod
    def _session_user_id():
        if not has_request_context():
            return None
        return session.get('admin_id')

    @classmethod
    def configure(cls, buffer_size):
        """Resize the in-memory buffer, keeping the newest entries"""
        with cls._lock:
            cls._entries = deque(cls._entries, maxlen=buffer_size)

    @classmethod
    def log(cls, level, source, message, details=None, user_id=None):
        """
        Record a log entry

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (team, sites, users, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
            user_id (str): Optional user identifier, defaults to the session admin
        """
        level = level.upper()
        ip_address, user_agent, request_path = cls._get_request_context()

        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)

        if user_id is None:
            user_id = cls._session_user_id()

        with cls._lock:
            entry = {
                'id': cls._next_id,
                'timestamp': datetime.now().isoformat(),
                'level': level,
                'source': source,
                'message': message,
                'details': details,
                'ip_address': ip_address,
                'user_agent': user_agent,
                'request_path': request_path,
                'user_id': user_id,
            }
            cls._next_id += 1
            cls._entries.append(entry)

        _std_logger.log(getattr(logging, level, logging.INFO), "[%s] %s", source, message)
        return entry

    @staticmethod
    def debug(source, message, details=None, user_id=None):
        """Log debug message"""
        return LoggingService.log('DEBUG', source, message, details, user_id)

    @staticmethod
    def info(source, message, details=None, user_id=None):
        """Log info message"""
        return LoggingService.log('INFO', source, message, details, user_id)

    @staticmethod
    def warning(source, message, details=None, user_id=None):
        """Log warning message"""
        return LoggingService.log('WARNING', source, message, details, user_id)

    @staticmethod
    def error(source, message, details=None, user_id=None):
        """Log error message"""
        return LoggingService.log('ERROR', source, message, details, user_id)

    @staticmethod
    def critical(source, message, details=None, user_id=None):
        """Log critical message"""
        return LoggingService.log('CRITICAL', source, message, details, user_id)

    @staticmethod
    def log_user_action(source, action, user_id=None, details=None):
        """Log user actions (login, create, delete, reorder, etc.)"""
        return LoggingService.info(source, f"User action: {action}", details, user_id)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        import traceback
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        return LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def log_security_event(message, details=None, ip_address=None):
        """Log security-related events"""
        if ip_address:
            details = details or {}
            details['provided_ip'] = ip_address

        return LoggingService.warning('security', message, details)

    @classmethod
    def get_recent(cls, limit=50, level=None, source=None):
        """Newest-first log entries, optionally filtered by level and source"""
        with cls._lock:
            entries = list(cls._entries)

        entries.reverse()
        if level:
            entries = [e for e in entries if e['level'] == level.upper()]
        if source:
            entries = [e for e in entries if e['source'] == source]
        return entries[:limit]

    @classmethod
    def clear(cls):
        """Drop all buffered entries"""
        with cls._lock:
            cls._entries.clear()


# Convenience instance for easy importing
logger = LoggingService()
