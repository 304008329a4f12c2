"""
Shared fixtures for the CMSDesk test suite.

NOTE: pytest and pytest-flask are listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import pytest
from flask import Flask

from cmsdesk import CMSDesk
from cmsdesk.core.logging_service import LoggingService


def make_app(options=None, **config):
    """Flask app with CMSDesk initialised and the demo content loaded."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["ADMIN_EMAIL"] = "admin@example.com"
    app.config["ADMIN_PASSWORD"] = "admin123"
    app.config.update(config)
    options = dict({'seed_demo_data': True}, **(options or {}))
    CMSDesk(app, options)
    return app


def login(client, user_id='1', role='super_admin', name='John Admin', email='admin@example.com'):
    with client.session_transaction() as sess:
        sess['admin_id'] = user_id
        sess['admin_email'] = email
        sess['admin_name'] = name
        sess['admin_role'] = role


@pytest.fixture(autouse=True)
def clear_logs():
    LoggingService.clear()
    yield
    LoggingService.clear()


@pytest.fixture
def app():
    """Fully initialised Flask app with every CMSDesk module registered."""
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    """Client signed in as the seeded super admin (user id '1')."""
    client = app.test_client()
    login(client)
    return client


@pytest.fixture
def editor_client(app):
    """Client signed in as an editor, who may not manage users."""
    client = app.test_client()
    login(client, user_id='3', role='editor', name='Mike Content', email='mike@example.com')
    return client


@pytest.fixture
def ext(app):
    return app.extensions["cmsdesk"]
