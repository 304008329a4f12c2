"""
Settings Module
===============

Admin screen for dashboard-wide settings: general, email (SMTP) and
security. Each section holds a single record.
"""

from flask import Blueprint

settings_bp = Blueprint(
    'settings',
    __name__,
    url_prefix='/admin/settings'
)

from . import routes

__all__ = ['settings_bp']
