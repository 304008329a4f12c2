"""
CMSDesk - A Flask CMS Admin Dashboard
=====================================

A modular admin dashboard for a small business website:
- Pages, blog posts and form submissions (leads)
- Testimonials, team members and services with display ordering
- Users, sites and dashboard settings
- A read-only public content API for the website itself

Usage:
    from flask import Flask
    from cmsdesk import CMSDesk

    app = Flask(__name__)
    CMSDesk(app)

    # or switch screens off
    CMSDesk(app, {'features': {'blog': False}})
"""

import secrets
from importlib import import_module

from .core.collection import CollectionStore
from .core.config import Config
from .core.entities import ENTITIES, SETTINGS_SECTIONS
from .core.logging_service import LoggingService
from .core.seed import demo_records, settings_records

__version__ = '0.1.0'

# feature name -> (module path, blueprint names)
MODULES = {
    'dashboard': ('cmsdesk.modules.dashboard', ('dashboard_bp', 'health_bp')),
    'pages': ('cmsdesk.modules.pages', ('pages_bp',)),
    'forms': ('cmsdesk.modules.forms', ('forms_bp',)),
    'blog': ('cmsdesk.modules.blog', ('blog_bp',)),
    'testimonials': ('cmsdesk.modules.testimonials', ('testimonials_bp',)),
    'team': ('cmsdesk.modules.team', ('team_bp',)),
    'services': ('cmsdesk.modules.services', ('services_bp',)),
    'users': ('cmsdesk.modules.users', ('users_bp',)),
    'sites': ('cmsdesk.modules.sites', ('sites_bp',)),
    'settings': ('cmsdesk.modules.settings', ('settings_bp',)),
    'content_public': ('cmsdesk.modules.content_public', ('content_public_bp',)),
}

# The dashboard owns login and cannot be switched off
REQUIRED_MODULES = ('dashboard',)


class CMSDesk:
    """
    Flask extension owning the collection stores and the admin blueprints.

    Options:
        features: {module name: bool} to enable or disable screens
        brand_name: shown in the dashboard (default: Config.BRAND_NAME)
        seed_demo_data: load the demo collections (default: Config.SEED_DEMO_DATA)
    """

    def __init__(self, app=None, options=None):
        self._config = dict(options or {})
        self._registered = []
        self.stores = {}
        self.settings = {}
        if app is not None:
            self.init_app(app)

    @property
    def brand_name(self):
        return self._config.get('brand_name') or Config.BRAND_NAME

    @property
    def features(self):
        features = {name: True for name in MODULES}
        features.update(self._config.get('features') or {})
        for name in REQUIRED_MODULES:
            features[name] = True
        return features

    def init_app(self, app):
        if not app.config.get('SECRET_KEY'):
            app.config['SECRET_KEY'] = Config.SECRET_KEY or secrets.token_hex(32)
            if not Config.SECRET_KEY:
                LoggingService.warning('cmsdesk', 'FLASK_SECRET_KEY not set, using a random key for this process')

        LoggingService.configure(int(app.config.get('CMSDESK_LOG_BUFFER_SIZE', Config.LOG_BUFFER_SIZE)))

        self._create_stores(app)
        self._register_modules(app)

        app.extensions['cmsdesk'] = self

        @app.context_processor
        def inject_cmsdesk():
            return {
                'cmsdesk_config': dict(self._config, features=self.features),
                'brand_name': self.brand_name,
            }

        LoggingService.info('cmsdesk', 'CMSDesk initialised', {'modules': self._registered})

    def _create_stores(self, app):
        seed = self._config.get('seed_demo_data')
        if seed is None:
            seed = app.config.get('CMSDESK_SEED_DEMO_DATA', Config.SEED_DEMO_DATA)

        for name, schema in ENTITIES.items():
            self.stores[name] = CollectionStore(schema, demo_records(schema) if seed else ())
        for name, schema in SETTINGS_SECTIONS.items():
            self.settings[name] = CollectionStore(schema, settings_records(schema))

    def _register_modules(self, app):
        for name, enabled in self.features.items():
            if not enabled:
                continue
            if name not in MODULES:
                LoggingService.warning('cmsdesk', f'Unknown feature {name!r} ignored')
                continue
            module_path, blueprints = MODULES[name]
            module = import_module(module_path)
            for bp_name in blueprints:
                app.register_blueprint(getattr(module, bp_name))
            self._registered.append(name)

    def store(self, name):
        """Collection store for an entity name (pages, posts, team...)"""
        return self.stores[name]

    def settings_store(self, section):
        return self.settings[section]

    def get_registered_modules(self):
        return list(self._registered)


__all__ = ['CMSDesk', 'MODULES']
