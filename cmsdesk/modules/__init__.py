"""
CMSDesk Modules
===============

One Flask blueprint per admin screen, plus the public content API.
"""

__all__ = [
    'dashboard', 'pages', 'forms', 'blog', 'testimonials', 'team',
    'services', 'users', 'sites', 'settings', 'content_public',
]
