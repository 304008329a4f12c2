"""
Notification sink for mutation outcomes.

Every user action ends in one success or failure signal. The signal is
recorded through the logging service and returned for the JSON response's
``message``; how a toast is drawn is up to the front end.
"""

from .logging_service import LoggingService


def notify(success, message, source='cmsdesk', details=None):
    if success:
        LoggingService.log_user_action(source, message, details=details)
    else:
        LoggingService.warning(source, message, details)

    return {'success': success, 'message': message}
