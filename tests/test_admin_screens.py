"""
Admin Screen Tests
==================

Drives each management blueprint through its JSON API with a signed-in
super admin.
Run with: pytest tests/test_admin_screens.py -v
"""

import pytest

from cmsdesk.core.identity import hash_password
from cmsdesk.core.logging_service import LoggingService


def ids(records):
    return [r['id'] for r in records]


# ---------------------------------------------------------------------------
# 1. Dashboard -- stats, recent submissions, logs
# ---------------------------------------------------------------------------

def test_dashboard_overview(admin_client):
    data = admin_client.get('/admin/').get_json()
    assert data["user"]["id"] == '1'
    assert 'pages' in data["modules"]


def test_dashboard_stats(admin_client):
    stats = admin_client.get('/admin/api/stats').get_json()

    assert stats["submissions"]["total"] == 5
    assert stats["submissions"]["new"] == 2
    assert stats["submissions"]["converted"] == 1
    assert stats["submissions"]["conversion_rate"] == 20.0
    assert stats["pages"] == {'total': 6, 'published': 5}
    assert stats["team"] == {'total': 4, 'active': 3}
    assert stats["sites"]["active"] == 2


@pytest.mark.parametrize("query, expected", [
    ("period=today", ['1', '2', '3', '4', '5']),
    ("form=quote", ['2', '5']),
    ("form=contact&status=new", ['1', '4']),
    ("status=converted", ['3']),
])
def test_recent_submission_filters(admin_client, query, expected):
    response = admin_client.get(f'/admin/api/submissions/recent?{query}&limit=10&as_of=2025-01-15T18:00')
    assert response.status_code == 200
    assert ids(response.get_json()["submissions"]) == expected


def test_recent_submissions_limit_and_bad_filters(admin_client):
    data = admin_client.get('/admin/api/submissions/recent?limit=2').get_json()
    assert len(data["submissions"]) == 2
    assert data["count"] == 5

    assert admin_client.get('/admin/api/submissions/recent?form=fax').status_code == 400
    assert admin_client.get('/admin/api/submissions/recent?period=decade').status_code == 400


def test_recent_logs(admin_client):
    LoggingService.clear()
    admin_client.delete('/admin/content/team/api/team/4')

    logs = admin_client.get('/admin/api/logs?source=team').get_json()["logs"]
    assert logs, "Deleting a team member should be logged"
    assert logs[0]["message"] == 'User action: Team member deleted successfully'
    assert logs[0]["user_id"] == '1'


# ---------------------------------------------------------------------------
# 2. Pages -- editor view, status, home page protection
# ---------------------------------------------------------------------------

def test_pages_list_and_filters(admin_client):
    data = admin_client.get('/admin/pages/api/pages?status=draft').get_json()
    assert ids(data["pages"]) == ['terms']
    assert data["total"] == 6

    data = admin_client.get('/admin/pages/api/pages?search=PRIVACY').get_json()
    assert ids(data["pages"]) == ['privacy']


def test_page_editor(admin_client):
    data = admin_client.get('/admin/pages/editor/about').get_json()
    assert data["id"] == 'about'
    assert data["fields"]["meta_title"] == 'About Us - Our Company'
    assert data["is_home"] is False
    assert admin_client.get('/admin/pages/editor/missing').status_code == 404


def test_home_page_cannot_be_deleted_until_replaced(admin_client):
    response = admin_client.delete('/admin/pages/api/pages/homepage')
    assert response.status_code == 409
    assert response.get_json()["error_type"] == 'ProtectedRecordError'

    assert admin_client.post('/admin/pages/api/pages/about/set-default').status_code == 200
    assert admin_client.get('/admin/pages/api/pages/home').get_json()["page"]["id"] == 'about'
    assert admin_client.delete('/admin/pages/api/pages/homepage').status_code == 200


def test_page_create_update_status(admin_client):
    response = admin_client.post('/admin/pages/api/pages', json={'name': 'FAQ', 'url': '/faq'})
    assert response.status_code == 201
    page = response.get_json()["page"]
    assert page["status"] == 'draft'
    assert page["last_modified"]

    response = admin_client.post(f'/admin/pages/api/pages/{page["id"]}/status', json={'status': 'published'})
    assert response.get_json()["page"]["status"] == 'published'

    response = admin_client.put(f'/admin/pages/api/pages/{page["id"]}', json={'title': 'Questions'})
    assert response.get_json()["page"]["title"] == 'Questions'
    assert response.get_json()["page"]["name"] == 'FAQ'


def test_page_create_requires_url(admin_client):
    response = admin_client.post('/admin/pages/api/pages', json={'name': 'FAQ'})
    assert response.status_code == 400
    assert response.get_json()["field"] == 'url'


# ---------------------------------------------------------------------------
# 3. Forms -- submissions, status changes, export
# ---------------------------------------------------------------------------

def test_submission_status_change(admin_client):
    response = admin_client.post('/admin/forms/api/submissions/1/status', json={'status': 'read'})
    assert response.status_code == 200
    assert response.get_json()["form_submission"]["status"] == 'read'

    response = admin_client.post('/admin/forms/api/submissions/1/status', json={'status': 'junk'})
    assert response.status_code == 400


def test_submission_export(admin_client):
    response = admin_client.get('/admin/forms/api/submissions/export?status=new')
    assert response.status_code == 200
    assert 'attachment; filename=submissions-' in response.headers["Content-Disposition"]
    data = response.get_json()
    assert data["count"] == 2
    assert ids(data["submissions"]) == ['1', '4']


def test_submission_delete_unknown(admin_client):
    response = admin_client.delete('/admin/forms/api/submissions/999')
    assert response.status_code == 404


# ---------------------------------------------------------------------------
# 4. Blog -- newest first, status filter
# ---------------------------------------------------------------------------

def test_blog_posts(admin_client):
    data = admin_client.get('/admin/blog/api/posts').get_json()
    assert ids(data["posts"]) == ['3', '1', '2']

    data = admin_client.get('/admin/blog/api/posts?status=published').get_json()
    assert ids(data["posts"]) == ['1', '2']

    response = admin_client.post('/admin/blog/api/posts', json={'title': 'Hello', 'status': 'published'})
    assert response.status_code == 201
    assert response.get_json()["blog_post"]["publish_date"]


# ---------------------------------------------------------------------------
# 5. Orderable content -- toggle and reorder
# ---------------------------------------------------------------------------

def test_team_move_down(admin_client):
    response = admin_client.post('/admin/content/team/api/team/1/move-down')
    data = response.get_json()
    assert data["moved"] is True
    assert ids(data["team"]) == ['2', '1', '3', '4']


def test_api_actions_leave_no_flashes_in_session(admin_client):
    for _ in range(20):
        admin_client.post('/admin/content/team/api/team/1/move-down')
        admin_client.post('/admin/content/team/api/team/1/move-up')
    admin_client.delete('/admin/pages/api/pages/homepage')

    with admin_client.session_transaction() as sess:
        assert '_flashes' not in sess
        assert sess['admin_id'] == '1'


def test_request_body_must_be_an_object(admin_client, client):
    response = admin_client.post('/admin/content/team/api/team', json=['Zoe', 'Designer'])
    assert response.status_code == 400
    assert response.get_json()["error"] == 'Request body must be an object'

    assert admin_client.put('/admin/content/team/api/team/1', json='Zoe').status_code == 400
    assert client.post('/admin/login', json=['admin@example.com', 'admin123']).status_code == 400


def test_reorder_at_boundary_is_a_no_op(admin_client):
    data = admin_client.post('/admin/content/testimonials/api/testimonials/1/move-up').get_json()
    assert data["success"] is True
    assert data["moved"] is False
    assert ids(data["testimonials"]) == ['1', '2', '3']


def test_toggle_testimonial(admin_client):
    response = admin_client.post('/admin/content/testimonials/api/testimonials/3/toggle')
    assert response.get_json()["testimonial"]["is_active"] is True

    data = admin_client.get('/admin/content/testimonials/api/testimonials?is_active=true').get_json()
    assert ids(data["testimonials"]) == ['1', '2', '3']


def test_create_team_member_goes_last(admin_client):
    response = admin_client.post('/admin/content/team/api/team',
                                 json={'name': 'Zoe', 'position': 'Designer'})
    assert response.status_code == 201
    member = response.get_json()["team_member"]
    assert member["display_order"] == 5

    rating = admin_client.post('/admin/content/testimonials/api/testimonials',
                               json={'client_name': 'Ann', 'testimonial': 'Great', 'rating': 9})
    assert rating.status_code == 400


def test_service_feature_editing(admin_client):
    base = '/admin/content/services/api/services/1/features'

    data = admin_client.post(base, json={'feature': 'Hosting'}).get_json()
    assert data["features"][-1] == 'Hosting'

    data = admin_client.put(f'{base}/0', json={'feature': 'Adaptive Design'}).get_json()
    assert data["features"][0] == 'Adaptive Design'

    data = admin_client.delete(f'{base}/1').get_json()
    assert 'SEO Optimized' not in data["features"]

    assert admin_client.delete(f'{base}/42').status_code == 400


def test_services_category_filter(admin_client):
    data = admin_client.get('/admin/content/services/api/services?category=Design').get_json()
    assert ids(data["services"]) == ['3']


# ---------------------------------------------------------------------------
# 6. Users -- capability gate, masked passwords, self protection
# ---------------------------------------------------------------------------

def test_users_require_super_admin(editor_client, client):
    assert client.get('/admin/users/api/users').status_code == 401

    response = editor_client.get('/admin/users/api/users')
    assert response.status_code == 403
    assert response.get_json()["error_type"] == 'PermissionDeniedError'


def test_user_passwords_are_masked_and_kept(app, admin_client):
    response = admin_client.post('/admin/users/api/users', json={
        'name': 'Nina', 'email': 'nina@example.com', 'password': 'p4ss', 'role': 'admin',
    })
    assert response.status_code == 201
    user = response.get_json()["user"]
    assert user["password"] == '********'

    response = admin_client.put(f'/admin/users/api/users/{user["id"]}', json={'name': 'Nina R', 'password': ''})
    assert response.status_code == 200

    stored = app.extensions["cmsdesk"].store('users').get(user["id"])
    assert stored["password"] == hash_password('p4ss')
    assert stored["name"] == 'Nina R'

    listing = admin_client.get('/admin/users/api/users').get_json()["users"]
    assert all(u["password"] in ('', '********') for u in listing)


def test_user_create_requires_password(admin_client):
    response = admin_client.post('/admin/users/api/users', json={'name': 'Nina', 'email': 'nina@example.com'})
    assert response.status_code == 400
    assert response.get_json()["field"] == 'password'


def test_user_cannot_remove_themself(admin_client):
    assert admin_client.delete('/admin/users/api/users/1').status_code == 409
    assert admin_client.post('/admin/users/api/users/1/toggle').status_code == 409
    assert admin_client.post('/admin/users/api/users/4/toggle').get_json()["user"]["status"] == 'active'


def test_roles_listing(admin_client):
    roles = admin_client.get('/admin/users/api/roles').get_json()["roles"]
    assert [r["role"] for r in roles] == ['super_admin', 'admin', 'editor']


# ---------------------------------------------------------------------------
# 7. Sites -- default protection and configuration
# ---------------------------------------------------------------------------

def test_default_site_protection(admin_client):
    assert admin_client.delete('/admin/sites/api/sites/1').status_code == 409
    assert admin_client.post('/admin/sites/api/sites/1/status', json={'status': 'inactive'}).status_code == 409

    response = admin_client.post('/admin/sites/api/sites/1/status', json={'status': 'maintenance'})
    assert response.status_code == 200


def test_status_change_requires_a_status(app, admin_client):
    response = admin_client.post('/admin/sites/api/sites/1/status', json={})
    assert response.status_code == 400
    assert response.get_json()["field"] == 'status'

    response = admin_client.put('/admin/users/api/users/1', json={'status': None})
    assert response.status_code == 400

    ext = app.extensions["cmsdesk"]
    assert ext.store('sites').get('1')['status'] == 'active'
    assert ext.store('users').get('1')['status'] == 'active'


def test_site_create_requires_name_and_domain(admin_client):
    response = admin_client.post('/admin/sites/api/sites', json={'name': 'Shop'})
    assert response.status_code == 400
    assert response.get_json()["field"] == 'domain'

    response = admin_client.post('/admin/sites/api/sites', json={'name': 'Shop', 'domain': 'shop.example.com'})
    assert response.status_code == 201
    assert response.get_json()["site"]["is_default"] is False


def test_site_configuration(admin_client):
    url = '/admin/sites/api/sites/2/configure'
    response = admin_client.put(url, json={'seo_title': 'Flagship', 'custom_domain': 'flagship.io'})
    assert response.status_code == 200
    assert response.get_json()["configuration"]["seo_title"] == 'Flagship'

    assert admin_client.get(url).get_json()["configuration"]["custom_domain"] == 'flagship.io'
    assert admin_client.put(url, json={'status': 'inactive'}).status_code == 400
    assert admin_client.put(url, json={'domain': ''}).status_code == 400


# ---------------------------------------------------------------------------
# 8. Settings -- sections, masked secrets
# ---------------------------------------------------------------------------

def test_settings_secret_round_trip(app, admin_client):
    url = '/admin/settings/api/settings/email'

    response = admin_client.put(url, json={'smtp_password': 'app-password', 'smtp_port': '465'})
    assert response.status_code == 200
    assert response.get_json()["settings"]["smtp_password"] == '********'
    assert response.get_json()["settings"]["smtp_port"] == 465

    # posting the masked value back keeps the secret
    admin_client.put(url, json={'smtp_password': '********', 'smtp_host': 'mail.example.com'})
    stored = app.extensions["cmsdesk"].settings_store('email').get('current')
    assert stored["smtp_password"] == 'app-password'
    assert stored["smtp_host"] == 'mail.example.com'


def test_settings_validation(admin_client):
    assert admin_client.put('/admin/settings/api/settings/security',
                            json={'session_timeout': 1}).status_code == 400
    assert admin_client.get('/admin/settings/api/settings/billing').status_code == 404

    sections = admin_client.get('/admin/settings/api/settings').get_json()["settings"]
    assert set(sections) == {'general', 'email', 'security'}
