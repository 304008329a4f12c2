"""
Forms Module
============

Admin screen for website form submissions (leads).

Provides:
- Submission list with search and status/form type filters
- Submission detail and status changes (new, read, converted)
- JSON export of the filtered list
"""

from flask import Blueprint

forms_bp = Blueprint(
    'forms',
    __name__,
    url_prefix='/admin/forms'
)

from . import routes

__all__ = ['forms_bp']
