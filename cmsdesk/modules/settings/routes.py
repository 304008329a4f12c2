"""
Settings Admin Routes
=====================

Secrets are returned masked. Saving a masked or blank secret keeps the
stored value, so the form can be posted back unchanged.
"""

from flask import jsonify

from . import settings_bp
from cmsdesk.core.admin_api import actor_id, admin_required, get_extension, register_error_handlers, request_data
from cmsdesk.core.entities import SETTINGS_SECTIONS
from cmsdesk.core.errors import NotFoundError
from cmsdesk.core.form_binding import FormBinding
from cmsdesk.core.notifications import notify

register_error_handlers(settings_bp, 'settings')

SETTINGS_ID = 'current'


def _section(name):
    schema = SETTINGS_SECTIONS.get(name)
    if schema is None:
        raise NotFoundError(f"Unknown settings section '{name}'")
    return schema, get_extension().settings_store(name)


def _values(schema, store):
    values = schema.serialize(store.get(SETTINGS_ID))
    values.pop('id', None)
    return values


@settings_bp.route('/api/settings')
@admin_required
def api_get_settings():
    """All sections, secrets masked"""
    sections = {}
    for name in SETTINGS_SECTIONS:
        schema, store = _section(name)
        sections[name] = _values(schema, store)
    return jsonify({'success': True, 'settings': sections})


@settings_bp.route('/api/settings/<section>', methods=['GET'])
@admin_required
def api_get_section(section):
    schema, store = _section(section)
    return jsonify({'success': True, 'section': section, 'settings': _values(schema, store)})


@settings_bp.route('/api/settings/<section>', methods=['PUT', 'POST'])
@admin_required
def api_save_section(section):
    schema, store = _section(section)
    binding = FormBinding.for_edit(schema, store.get(SETTINGS_ID))
    binding.set_fields(request_data())
    binding.commit(store, actor_id=actor_id())

    message = f'{schema.label.capitalize()} saved successfully'
    notify(True, message, 'settings', {'section': section})
    return jsonify({'success': True, 'message': message, 'settings': _values(schema, store)})
