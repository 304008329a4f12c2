"""
Blog Admin Routes
=================

Posts CRUD with status filter. Newest publish date first.
"""

from . import blog_bp
from cmsdesk.core.admin_api import register_collection_routes, register_error_handlers
from cmsdesk.core.entities import POST

register_error_handlers(blog_bp, 'blog')
register_collection_routes(blog_bp, POST, 'posts')
