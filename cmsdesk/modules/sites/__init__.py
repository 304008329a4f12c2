"""
Sites Module
============

Admin screen for the websites managed from this dashboard.

Provides:
- Site CRUD (name and domain required)
- Status changes (active, inactive, maintenance)
- Default site selection
- Per-site configuration (domain and SEO settings)
"""

from flask import Blueprint

sites_bp = Blueprint(
    'sites',
    __name__,
    url_prefix='/admin/sites'
)

from . import routes

__all__ = ['sites_bp']
