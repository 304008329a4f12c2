"""
Admin API Helpers
=================

Shared pieces for the management blueprints: the admin session guard,
JSON error handling for collection errors, and the generic CRUD + reorder
routes every collection screen is built from.
"""

from functools import wraps

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .errors import CollectionError, ValidationError
from .form_binding import FormBinding
from .identity import current_identity
from .logging_service import LoggingService
from .notifications import notify
from .projection import project


def admin_required(f):
    """Decorator to require admin login (JSON 401 for API callers)"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_identity() is None:
            return jsonify({'success': False, 'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated_function


def get_extension():
    return current_app.extensions['cmsdesk']


def get_store(name):
    return get_extension().store(name)


def actor_id():
    identity = current_identity()
    return identity.id if identity else None


def request_data():
    """JSON body, falling back to form fields"""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object")
    return data


def query_criteria(*names):
    """Projection criteria from query args (status, search and filter fields)"""
    criteria = {}
    for name in ('status', 'search') + names:
        value = request.args.get(name)
        if value not in (None, ''):
            criteria[name] = value
    return criteria


def register_error_handlers(bp, source):
    """Turn collection errors raised in ``bp`` into JSON responses"""

    @bp.errorhandler(CollectionError)
    def handle_collection_error(error):
        notify(False, error.message, source, {'error_type': type(error).__name__, 'path': request.path})
        return jsonify(error.to_dict()), error.status_code

    @bp.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        LoggingService.log_error_with_traceback(source, error, {'path': request.path})
        return jsonify({'success': False, 'error': 'An unexpected error occurred'}), 500


def register_collection_routes(bp, schema, path, source=None, search_filters=None):
    """
    Add list/get/create/update/delete routes for ``schema`` under
    ``/api/<path>``, plus toggle, reorder, status and default routes
    when the schema supports them.
    """
    source = source or schema.name
    filters = tuple(search_filters if search_filters is not None else schema.filter_fields)
    label = schema.label.capitalize()
    base = f'/api/{path}'
    item = f'{base}/<record_id>'

    def _json_record(record, status=200, message=None):
        body = {'success': True, schema.label.replace(' ', '_'): schema.serialize(record)}
        if message:
            body['message'] = message
        return jsonify(body), status

    def _json_after(record_id, message, extra=None):
        notify(True, message, source, dict({'id': record_id}, **(extra or {})))
        record = get_store(schema.name).get(record_id)
        return _json_record(record, message=message)

    @admin_required
    def list_records():
        store = get_store(schema.name)
        records = project(store.records, query_criteria(*filters), schema)
        return jsonify({
            'success': True,
            schema.name: [schema.serialize(r) for r in records],
            'count': len(records),
            'total': len(store),
            'version': store.version,
        })

    @admin_required
    def get_record(record_id):
        return _json_record(get_store(schema.name).get(record_id))

    @admin_required
    def create_record():
        binding = FormBinding.for_create(schema, request_data())
        record = binding.commit(get_store(schema.name))
        message = f'{label} created successfully'
        notify(True, message, source, {'id': record['id']})
        return _json_record(record, status=201, message=message)

    @admin_required
    def update_record(record_id):
        store = get_store(schema.name)
        binding = FormBinding.for_edit(schema, store.get(record_id))
        binding.set_fields(request_data())
        binding.commit(store, actor_id=actor_id())
        return _json_after(record_id, f'{label} updated successfully')

    @admin_required
    def delete_record(record_id):
        get_store(schema.name).remove(record_id, actor_id=actor_id())
        message = f'{label} deleted successfully'
        notify(True, message, source, {'id': record_id})
        return jsonify({'success': True, 'message': message, 'id': record_id})

    bp.add_url_rule(base, f'list_{path}', list_records, methods=['GET'])
    bp.add_url_rule(base, f'create_{path}', create_record, methods=['POST'])
    bp.add_url_rule(item, f'get_{path}', get_record, methods=['GET'])
    bp.add_url_rule(item, f'update_{path}', update_record, methods=['PUT'])
    bp.add_url_rule(item, f'delete_{path}', delete_record, methods=['DELETE'])

    if schema.active_field:
        @admin_required
        def toggle_record(record_id):
            get_store(schema.name).toggle_active(record_id, actor_id=actor_id())
            return _json_after(record_id, f'{label} status updated')

        bp.add_url_rule(f'{item}/toggle', f'toggle_{path}', toggle_record, methods=['POST'])

    if schema.status_field:
        @admin_required
        def change_status(record_id):
            status = request_data().get('status')
            get_store(schema.name).set_status(record_id, status, actor_id=actor_id())
            return _json_after(record_id, f'{label} marked as {status}', {'status': status})

        bp.add_url_rule(f'{item}/status', f'status_{path}', change_status, methods=['POST'])

    if schema.orderable:
        def _reorder(record_id, direction):
            store = get_store(schema.name)
            version = store.version
            if direction == 'up':
                store.move_up(record_id)
            else:
                store.move_down(record_id)
            moved = store.version != version
            if moved:
                notify(True, 'Order updated', source, {'id': record_id, 'direction': direction})
            records = project(store.records, None, schema)
            return jsonify({
                'success': True,
                'moved': moved,
                'message': 'Order updated' if moved else f'{label} is already at the {"top" if direction == "up" else "bottom"}',
                schema.name: [schema.serialize(r) for r in records],
            })

        @admin_required
        def move_record_up(record_id):
            return _reorder(record_id, 'up')

        @admin_required
        def move_record_down(record_id):
            return _reorder(record_id, 'down')

        bp.add_url_rule(f'{item}/move-up', f'move_up_{path}', move_record_up, methods=['POST'])
        bp.add_url_rule(f'{item}/move-down', f'move_down_{path}', move_record_down, methods=['POST'])

    if schema.default_field:
        @admin_required
        def make_default(record_id):
            get_store(schema.name).set_default(record_id)
            return _json_after(record_id, f'Default {schema.label} updated')

        bp.add_url_rule(f'{item}/set-default', f'set_default_{path}', make_default, methods=['POST'])
