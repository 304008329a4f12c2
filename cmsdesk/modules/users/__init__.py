"""
Users Module
============

Admin user management. Only super admins can reach this screen.

Provides:
- User CRUD with role and site access
- Activate/deactivate accounts
- Role descriptions for the role picker
"""

from flask import Blueprint

users_bp = Blueprint(
    'users',
    __name__,
    url_prefix='/admin/users'
)

from . import routes

__all__ = ['users_bp']
