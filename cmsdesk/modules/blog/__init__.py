"""
Blog Module
===========

Admin screen for blog posts (draft, published, archived).
"""

from flask import Blueprint

blog_bp = Blueprint(
    'blog',
    __name__,
    url_prefix='/admin/blog'
)

from . import routes

__all__ = ['blog_bp']
