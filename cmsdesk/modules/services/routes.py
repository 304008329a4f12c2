"""
Service Admin Routes
====================

Generic CRUD and reorder routes, plus the feature list editor. Each feature
edit goes through a form binding so the blank-entry cleanup and validation
match a full save.
"""

from flask import jsonify

from . import services_bp
from cmsdesk.core.admin_api import (
    actor_id, admin_required, get_store, register_collection_routes, register_error_handlers, request_data,
)
from cmsdesk.core.entities import SERVICE
from cmsdesk.core.form_binding import FormBinding
from cmsdesk.core.notifications import notify

register_error_handlers(services_bp, 'services')
register_collection_routes(services_bp, SERVICE, 'services')


def _edit_features(record_id, edit):
    store = get_store(SERVICE.name)
    binding = FormBinding.for_edit(SERVICE, store.get(record_id))
    edit(binding)
    service = binding.commit(store, actor_id=actor_id())
    notify(True, 'Service features updated', 'services', {'id': record_id})
    return jsonify({'success': True, 'service': SERVICE.serialize(service), 'features': service['features']})


@services_bp.route('/api/services/<record_id>/features', methods=['POST'])
@admin_required
def add_feature(record_id):
    feature = request_data().get('feature', '')
    return _edit_features(record_id, lambda b: b.add_item('features', feature))


@services_bp.route('/api/services/<record_id>/features/<int:index>', methods=['PUT'])
@admin_required
def update_feature(record_id, index):
    feature = request_data().get('feature', '')
    return _edit_features(record_id, lambda b: b.update_item('features', index, feature))


@services_bp.route('/api/services/<record_id>/features/<int:index>', methods=['DELETE'])
@admin_required
def remove_feature(record_id, index):
    return _edit_features(record_id, lambda b: b.remove_item('features', index))
