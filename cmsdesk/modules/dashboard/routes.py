"""
Admin Dashboard Routes
======================

Authentication and the dashboard overview for admin users.
"""

import hmac
import time
from datetime import datetime

from flask import jsonify, request

from . import dashboard_bp, health_bp
from cmsdesk.core.admin_api import admin_required, get_extension, get_store, register_error_handlers, request_data
from cmsdesk.core.config import get_config_value
from cmsdesk.core.entities import SUBMISSION, PAGE, POST, TESTIMONIAL, TEAM_MEMBER, SERVICE, USER, SITE
from cmsdesk.core.errors import ValidationError
from cmsdesk.core.identity import (
    Identity, current_identity, hash_password, login_identity, logout_identity, role_for_email,
)
from cmsdesk.core.logging_service import LoggingService
from cmsdesk.core.projection import count_by, parse_timestamp, project, within_period

register_error_handlers(dashboard_bp, 'dashboard')

_STARTED_AT = time.time()

# Quick filter values -> submission form types
FORM_FILTERS = {
    'contact': 'Contact',
    'quote': 'Quote Request',
    'newsletter': 'Newsletter',
    'other': 'Other',
}


def _check_credentials(email, password):
    expected_email = str(get_config_value('ADMIN_EMAIL', '')).strip().lower()
    expected_password = str(get_config_value('ADMIN_PASSWORD', ''))
    if not expected_email or not expected_password:
        return False
    return email == expected_email and hmac.compare_digest(
        hash_password(password), hash_password(expected_password))


def _identity_for(email):
    """Identity for the configured admin, matched to its user record when one exists"""
    users = get_store(USER.name)
    for user in users.records:
        if user.get('email', '').lower() == email:
            if user.get('status') != 'active':
                return None
            users.update(user['id'],
                         {'last_login': datetime.now().strftime('%Y-%m-%d %H:%M')})
            return Identity(user['id'], user.get('name'), email, user.get('role', 'editor'))

    return Identity(
        get_config_value('ADMIN_ID', '1'),
        get_config_value('ADMIN_NAME', 'Admin'),
        email,
        role_for_email(email),
    )


def _as_of():
    """Reference time for period filters (defaults to now)"""
    value = request.args.get('as_of')
    if not value:
        return datetime.now()
    stamp = parse_timestamp(value.replace('T', ' '))
    if stamp is None:
        raise ValidationError(f"Invalid as_of timestamp '{value}'", field='as_of')
    return stamp


@dashboard_bp.route('/login', methods=['POST'])
def login():
    """Admin login route"""
    data = request_data()
    email = (data.get('email') or '').strip().lower()
    password = data.get('password') or ''

    if not email or not password:
        return jsonify({'success': False, 'error': 'Please enter both email and password'}), 400

    if not _check_credentials(email, password):
        LoggingService.log_security_event('Failed admin login', {'email': email})
        return jsonify({'success': False, 'error': 'Invalid email or password'}), 401

    identity = _identity_for(email)
    if identity is None:
        LoggingService.log_security_event('Login attempt for inactive account', {'email': email})
        return jsonify({'success': False, 'error': 'This account has been deactivated'}), 403

    login_identity(identity)
    LoggingService.log_user_action('dashboard', 'login', user_id=identity.id)
    return jsonify({'success': True, 'message': 'Login successful', 'user': identity.to_dict()})


@dashboard_bp.route('/logout', methods=['POST'])
def logout():
    """Admin logout route"""
    identity = current_identity()
    logout_identity()
    if identity:
        LoggingService.log_user_action('dashboard', 'logout', user_id=identity.id)
    return jsonify({'success': True, 'message': 'You have been logged out'})


@dashboard_bp.route('/status')
def status():
    """Check admin login status (API endpoint)"""
    identity = current_identity()
    if identity:
        return jsonify({'logged_in': True, 'user': identity.to_dict()})
    return jsonify({'logged_in': False}), 401


@dashboard_bp.route('/')
@dashboard_bp.route('/dashboard')
@admin_required
def dashboard():
    """Dashboard overview: who is signed in and which screens are available"""
    ext = get_extension()
    return jsonify({
        'success': True,
        'brand_name': ext.brand_name,
        'user': current_identity().to_dict(),
        'modules': ext.get_registered_modules(),
    })


@dashboard_bp.route('/api/stats')
@admin_required
def api_stats():
    """
    API endpoint for the dashboard stats cards

    Submission counts per status and conversion rate, plus how much
    content each screen currently holds.
    """
    submissions = get_store(SUBMISSION.name).records
    by_status = count_by(submissions, 'status')
    total = len(submissions)
    converted = by_status.get('converted', 0)

    def published(schema):
        return len(project(get_store(schema.name).records, {'status': 'published'}, schema))

    def active(schema):
        return len([r for r in get_store(schema.name).records if schema.is_active(r)])

    stats = {
        'submissions': {
            'total': total,
            'new': by_status.get('new', 0),
            'read': by_status.get('read', 0),
            'converted': converted,
            'conversion_rate': round(converted * 100.0 / total, 1) if total else 0.0,
            'by_form_type': count_by(submissions, 'form_type'),
        },
        'pages': {'total': len(get_store(PAGE.name)), 'published': published(PAGE)},
        'posts': {'total': len(get_store(POST.name)), 'published': published(POST)},
        'testimonials': {'total': len(get_store(TESTIMONIAL.name)), 'active': active(TESTIMONIAL)},
        'team': {'total': len(get_store(TEAM_MEMBER.name)), 'active': active(TEAM_MEMBER)},
        'services': {'total': len(get_store(SERVICE.name)), 'active': active(SERVICE)},
        'users': {'total': len(get_store(USER.name)), 'active': active(USER)},
        'sites': {'total': len(get_store(SITE.name)), 'active': active(SITE)},
    }
    return jsonify(stats)


@dashboard_bp.route('/api/submissions/recent')
@admin_required
def recent_submissions():
    """
    Recent submissions filtered by the dashboard quick filters

    Query params:
        period: today, week, month, last30 (default: all time)
        form: all, contact, quote, newsletter, other
        status: all, new, read, converted
        limit: max rows (default 5)
    """
    period = request.args.get('period', 'all')
    form = request.args.get('form', 'all')
    limit = request.args.get('limit', 5, type=int)

    criteria = {'status': request.args.get('status', 'all')}
    if form not in ('', 'all'):
        if form not in FORM_FILTERS:
            raise ValidationError(f"Unknown form filter '{form}'", field='form')
        criteria['form_type'] = FORM_FILTERS[form]

    records = get_store(SUBMISSION.name).records
    records = within_period(records, 'datetime', period, _as_of())
    records = project(records, criteria, SUBMISSION)
    return jsonify({
        'success': True,
        'submissions': records[:max(limit, 0)],
        'count': len(records),
    })


@dashboard_bp.route('/api/logs')
@admin_required
def recent_logs():
    """Most recent log entries"""
    entries = LoggingService.get_recent(
        limit=request.args.get('limit', 50, type=int),
        level=request.args.get('level'),
        source=request.args.get('source'),
    )
    return jsonify({'success': True, 'logs': entries, 'count': len(entries)})


@health_bp.route('/health')
def health():
    """Public health check: collection sizes and uptime"""
    ext = get_extension()
    collections = {name: len(store) for name, store in ext.stores.items()}
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now().isoformat(),
        'checks': {
            'collections': collections,
            'uptime': {'seconds': int(time.time() - _STARTED_AT)},
        },
    })
