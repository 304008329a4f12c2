import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default='1'):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Base configuration for CMSDesk.
    Host projects override any of these through environment variables
    or through their Flask app.config.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Branding
    BRAND_NAME = os.getenv('BRAND_NAME', 'CMS Dashboard')

    # Single admin credential checked by the dashboard login.
    # Any other identity comes from the host's identity provider.
    ADMIN_EMAIL = os.getenv('CMSDESK_ADMIN_EMAIL', 'admin@example.com')
    ADMIN_PASSWORD = os.getenv('CMSDESK_ADMIN_PASSWORD', 'admin123')
    ADMIN_NAME = os.getenv('CMSDESK_ADMIN_NAME', 'John Admin')
    ADMIN_ID = os.getenv('CMSDESK_ADMIN_ID', '1')

    # Load the demo collections (pages, posts, team...) on startup
    SEED_DEMO_DATA = _env_flag('CMSDESK_SEED_DEMO_DATA')

    # In-memory log buffer
    LOG_BUFFER_SIZE = int(os.getenv('CMSDESK_LOG_BUFFER_SIZE', '500'))

    # Origins allowed to read the public content API
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv('CMSDESK_CORS_ORIGINS', 'http://localhost:3000,http://localhost:5173').split(',')
        if origin.strip()
    ]

    # Port for local server (optional, projects can set this)
    port = int(os.getenv('PORT', '5000'))


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val is not None:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val is not None:
        return val
    return os.getenv(key, default)
