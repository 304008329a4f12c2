"""
Public Content API Module
=========================

Public, read-only API for the website front end.
Designed for cross-site fetching by the public site.

Provides:
- /api/content/team, /services, /testimonials (active only, display order)
- /api/content/posts (published only, newest first)
- /api/content/submissions (POST) for website contact forms
"""

from flask import Blueprint

content_public_bp = Blueprint(
    'content_public',
    __name__,
    url_prefix='/api/content'
)

from . import routes

__all__ = ['content_public_bp']
