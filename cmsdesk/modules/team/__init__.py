"""
Team Module
===========

Admin screen for the team members listed on the public site.
"""

from flask import Blueprint

team_bp = Blueprint(
    'team',
    __name__,
    url_prefix='/admin/content/team'
)

from . import routes

__all__ = ['team_bp']
