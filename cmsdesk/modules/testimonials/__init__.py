"""
Testimonials Module
===================

Admin screen for client testimonials shown on the public site.
Active testimonials are displayed in their display order.
"""

from flask import Blueprint

testimonials_bp = Blueprint(
    'testimonials',
    __name__,
    url_prefix='/admin/content/testimonials'
)

from . import routes

__all__ = ['testimonials_bp']
