"""
Pages Module
============

Admin screen for the website's pages.

Provides:
- Page list with status filter and search
- Editor view for a single page (by route id)
- Create, update, publish/unpublish, set home page, delete
"""

from flask import Blueprint

pages_bp = Blueprint(
    'pages',
    __name__,
    url_prefix='/admin/pages'
)

from . import routes

__all__ = ['pages_bp']
