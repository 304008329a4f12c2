"""
User Admin Routes
=================

Passwords are write-only: responses always carry the masked value, and an
edit that leaves the password blank keeps the stored one. The signed-in
user cannot delete or deactivate their own account.
"""

from flask import jsonify

from . import users_bp
from cmsdesk.core.admin_api import register_collection_routes, register_error_handlers
from cmsdesk.core.entities import ROLE_DESCRIPTIONS, ROLES, USER
from cmsdesk.core.errors import PermissionDeniedError
from cmsdesk.core.identity import can_manage_users, current_identity
from cmsdesk.core.logging_service import LoggingService

register_error_handlers(users_bp, 'users')


@users_bp.before_request
def require_user_manager():
    identity = current_identity()
    if identity is None:
        return jsonify({'success': False, 'error': 'Authentication required'}), 401
    if not can_manage_users(identity):
        LoggingService.log_security_event(
            'User management denied', {'user_id': identity.id, 'role': identity.role})
        raise PermissionDeniedError('You do not have permission to manage users')


@users_bp.route('/api/roles')
def list_roles():
    return jsonify({
        'success': True,
        'roles': [{'role': role, 'description': ROLE_DESCRIPTIONS[role]} for role in ROLES],
    })


register_collection_routes(users_bp, USER, 'users')
