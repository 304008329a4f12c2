"""
Dashboard Module
================

Admin dashboard for CMSDesk.

Provides core admin functionality:
- Admin authentication (login/logout) against the configured credential
- Dashboard statistics and recent submissions with quick filters
- Recent log entries
- Public health check

This is the foundation module that the management screens plug into.
"""

from flask import Blueprint

# Note: Blueprint name is 'admin' so other modules can redirect to admin.login
dashboard_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/admin'
)

health_bp = Blueprint('health', __name__)

# Import routes after blueprint is created
from . import routes

__all__ = ['dashboard_bp', 'health_bp']
