"""
Identity, Logging and Error Tests
=================================
"""

from cmsdesk.core.errors import NotFoundError, ProtectedRecordError
from cmsdesk.core.identity import Identity, can_manage_users, role_for_email
from cmsdesk.core.logging_service import LoggingService


# ---------------------------------------------------------------------------
# 1. Identity -- role claims and the user management capability
# ---------------------------------------------------------------------------

def test_role_for_email():
    assert role_for_email('Admin@Example.com') == 'super_admin'
    assert role_for_email('manager@example.com') == 'admin'
    assert role_for_email('mike@example.com') == 'editor'


def test_identity_from_provider_profile():
    identity = Identity.from_provider(42, 'sales.manager@example.com', first_name='Sam')
    assert identity.id == '42'
    assert identity.display_name == 'Sam'
    assert identity.role == 'admin'
    assert not can_manage_users(identity)


def test_only_super_admins_manage_users():
    assert can_manage_users(Identity('1', 'Ann', 'ann@example.com', 'super_admin'))
    assert not can_manage_users(Identity('2', 'Ben', 'ben@example.com', 'owner'))
    assert not can_manage_users(None)


# ---------------------------------------------------------------------------
# 2. Logging -- bounded buffer, newest first, filters
# ---------------------------------------------------------------------------

def test_logging_buffer_is_bounded_and_newest_first():
    LoggingService.configure(3)
    try:
        for i in range(5):
            LoggingService.info('tests', f'entry {i}', {'i': i})
        LoggingService.error('other', 'boom')

        recent = LoggingService.get_recent()
        assert [e['message'] for e in recent] == ['boom', 'entry 4', 'entry 3']
        assert LoggingService.get_recent(level='error')[0]['source'] == 'other'
        assert len(LoggingService.get_recent(source='tests', limit=1)) == 1
        assert '"i": 4' in recent[1]['details']
    finally:
        LoggingService.configure(500)


def test_security_events_use_the_security_source():
    entry = LoggingService.log_security_event('Failed admin login', {'email': 'x@example.com'}, ip_address='10.0.0.1')
    assert entry['source'] == 'security'
    assert entry['level'] == 'WARNING'
    assert '10.0.0.1' in entry['details']


# ---------------------------------------------------------------------------
# 3. Errors -- JSON payloads and status codes
# ---------------------------------------------------------------------------

def test_error_payloads():
    error = ProtectedRecordError('Cannot delete the default site', record_id='1')
    assert error.status_code == 409
    assert error.to_dict() == {
        'success': False,
        'error': 'Cannot delete the default site',
        'error_type': 'ProtectedRecordError',
        'id': '1',
    }
    assert NotFoundError('missing').status_code == 404
