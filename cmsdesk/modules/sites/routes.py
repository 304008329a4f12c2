"""
Site Admin Routes
=================

The default site cannot be deleted or taken out of service; make another
site the default first.
"""

from flask import jsonify

from . import sites_bp
from cmsdesk.core.admin_api import (
    actor_id, admin_required, get_store, register_collection_routes, register_error_handlers, request_data,
)
from cmsdesk.core.entities import SITE
from cmsdesk.core.errors import ValidationError
from cmsdesk.core.form_binding import FormBinding
from cmsdesk.core.notifications import notify

register_error_handlers(sites_bp, 'sites')
register_collection_routes(sites_bp, SITE, 'sites')

# Fields editable from the configure dialog
CONFIGURE_FIELDS = (
    'name', 'domain', 'description', 'custom_domain',
    'seo_title', 'seo_description', 'analytics_id', 'favicon_url',
)


@sites_bp.route('/api/sites/<record_id>/configure', methods=['GET'])
@admin_required
def get_site_configuration(record_id):
    site = get_store(SITE.name).get(record_id)
    return jsonify({
        'success': True,
        'id': record_id,
        'configuration': {field: site.get(field) for field in CONFIGURE_FIELDS},
    })


@sites_bp.route('/api/sites/<record_id>/configure', methods=['PUT'])
@admin_required
def configure_site(record_id):
    data = request_data()
    unknown = sorted(set(data) - set(CONFIGURE_FIELDS))
    if unknown:
        raise ValidationError(f"Cannot configure '{unknown[0]}' here", field=unknown[0])

    store = get_store(SITE.name)
    binding = FormBinding.for_edit(SITE, store.get(record_id))
    binding.set_fields(data)
    site = binding.commit(store, actor_id=actor_id())
    notify(True, 'Site configuration saved', 'sites', {'id': record_id})
    return jsonify({
        'success': True,
        'message': 'Site configuration saved',
        'configuration': {field: site.get(field) for field in CONFIGURE_FIELDS},
    })
