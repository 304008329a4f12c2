from . import team_bp
from cmsdesk.core.admin_api import register_collection_routes, register_error_handlers
from cmsdesk.core.entities import TEAM_MEMBER

register_error_handlers(team_bp, 'team')
register_collection_routes(team_bp, TEAM_MEMBER, 'team')
