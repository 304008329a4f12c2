"""
Public content API for the website front end.

GET /api/content/team
GET /api/content/services?category=Design
GET /api/content/testimonials
GET /api/content/posts?limit=3
GET /api/content/posts/<id>
POST /api/content/submissions

Returns only what the public site may show, with CORS headers for the
configured origins. Nothing here needs an admin session.
"""


from flask import jsonify, request
from flask_cors import cross_origin

from . import content_public_bp
from cmsdesk.core.admin_api import get_store, register_error_handlers, request_data
from cmsdesk.core.config import Config
from cmsdesk.core.entities import POST, SERVICE, SUBMISSION, TEAM_MEMBER, TESTIMONIAL
from cmsdesk.core.errors import NotFoundError, ValidationError
from cmsdesk.core.form_binding import FormBinding
from cmsdesk.core.logging_service import LoggingService
from cmsdesk.core.projection import active_only, project

register_error_handlers(content_public_bp, 'content_public')

# Allowed origins for CORS, from CMSDESK_CORS_ORIGINS
ALLOWED_ORIGINS = Config.CORS_ORIGINS

# Fields a public form may fill in
SUBMISSION_FIELDS = ('name', 'email', 'phone', 'form_type', 'message', 'source')

# Fields hidden from the public site
_PRIVATE_FIELDS = ('is_active', 'display_order')


def _public(record):
    return {k: v for k, v in record.items() if k not in _PRIVATE_FIELDS}


def _active(schema):
    return [_public(r) for r in active_only(get_store(schema.name).records, schema)]


@content_public_bp.route('/team', methods=['GET'])
@cross_origin(origins=ALLOWED_ORIGINS)
def public_team():
    team = _active(TEAM_MEMBER)
    return jsonify({'team': team, 'count': len(team)})


@content_public_bp.route('/services', methods=['GET'])
@cross_origin(origins=ALLOWED_ORIGINS)
def public_services():
    services = _active(SERVICE)
    category = request.args.get('category', '').strip()
    if category:
        services = [s for s in services if s.get('category') == category]
    return jsonify({'services': services, 'count': len(services)})


@content_public_bp.route('/testimonials', methods=['GET'])
@cross_origin(origins=ALLOWED_ORIGINS)
def public_testimonials():
    testimonials = _active(TESTIMONIAL)
    return jsonify({'testimonials': testimonials, 'count': len(testimonials)})


@content_public_bp.route('/posts', methods=['GET'])
@cross_origin(origins=ALLOWED_ORIGINS)
def public_posts():
    limit = min(max(request.args.get('limit', 10, type=int), 1), 50)
    posts = project(get_store(POST.name).records, {'status': 'published'}, POST)
    return jsonify({'posts': posts[:limit], 'count': len(posts)})


@content_public_bp.route('/posts/<record_id>', methods=['GET'])
@cross_origin(origins=ALLOWED_ORIGINS)
def public_post(record_id):
    post = get_store(POST.name).get(record_id)
    if post.get('status') != 'published':
        raise NotFoundError(f"No blog post with id '{record_id}'", record_id=record_id)
    return jsonify({'post': post})


@content_public_bp.route('/submissions', methods=['POST'])
@cross_origin(origins=ALLOWED_ORIGINS)
def submit_form():
    """Record a website form submission as a new lead"""
    data = request_data()
    unknown = sorted(set(data) - set(SUBMISSION_FIELDS))
    if unknown:
        raise ValidationError(f"Unexpected field '{unknown[0]}'", field=unknown[0])

    binding = FormBinding.for_create(SUBMISSION, data)
    submission = binding.commit(get_store(SUBMISSION.name))
    LoggingService.info('content_public', 'Form submission received',
                        {'id': submission['id'], 'form_type': submission['form_type']})
    return jsonify({'success': True, 'id': submission['id'], 'message': 'Thank you, we will be in touch'}), 201
