"""
Services Module
===============

Admin screen for the services offered on the public site.

Provides:
- Service CRUD, show/hide and reorder
- Editing of each service's feature list
"""

from flask import Blueprint

services_bp = Blueprint(
    'services',
    __name__,
    url_prefix='/admin/content/services'
)

from . import routes

__all__ = ['services_bp']
