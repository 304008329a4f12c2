"""
Testimonial Admin Routes
========================

CRUD, show/hide and reorder for testimonials.
"""

from . import testimonials_bp
from cmsdesk.core.admin_api import register_collection_routes, register_error_handlers
from cmsdesk.core.entities import TESTIMONIAL

register_error_handlers(testimonials_bp, 'testimonials')
register_collection_routes(testimonials_bp, TESTIMONIAL, 'testimonials')
