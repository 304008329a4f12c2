"""
Pages Admin Routes
==================

CRUD for pages. The home page is the collection's default record and can
never be deleted; pick another home page first.
"""

from flask import jsonify

from . import pages_bp
from cmsdesk.core.admin_api import admin_required, get_store, register_collection_routes, register_error_handlers
from cmsdesk.core.entities import PAGE
from cmsdesk.core.form_binding import FormBinding

register_error_handlers(pages_bp, 'pages')
register_collection_routes(pages_bp, PAGE, 'pages')


@pages_bp.route('/editor/<record_id>')
@admin_required
def page_editor(record_id):
    """Editable fields for one page, plus what the editor needs to render them"""
    page = get_store(PAGE.name).get(record_id)
    binding = FormBinding.for_edit(PAGE, page)
    return jsonify({
        'success': True,
        'id': binding.record_id,
        'fields': binding.buffer,
        'is_home': bool(page.get(PAGE.default_field)),
        'status_choices': list(PAGE.choices['status']),
    })


@pages_bp.route('/api/pages/home')
@admin_required
def home_page():
    page = get_store(PAGE.name).find_default()
    if page is None:
        return jsonify({'success': False, 'error': 'No home page has been set'}), 404
    return jsonify({'success': True, 'page': page})
