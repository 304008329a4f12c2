"""
Form Submission Admin Routes
============================
"""

import json
from datetime import datetime

from flask import Response

from . import forms_bp
from cmsdesk.core.admin_api import (
    admin_required, get_store, query_criteria, register_collection_routes, register_error_handlers,
)
from cmsdesk.core.entities import SUBMISSION
from cmsdesk.core.logging_service import LoggingService
from cmsdesk.core.projection import project

register_error_handlers(forms_bp, 'forms')
register_collection_routes(forms_bp, SUBMISSION, 'submissions')


@forms_bp.route('/api/submissions/export')
@admin_required
def export_submissions():
    """Download the currently filtered submissions as a JSON file"""
    records = project(get_store(SUBMISSION.name).records,
                      query_criteria(*SUBMISSION.filter_fields), SUBMISSION)
    filename = f"submissions-{datetime.now().strftime('%Y%m%d-%H%M')}.json"

    LoggingService.log_user_action('forms', 'export_submissions', details={'count': len(records)})
    return Response(
        json.dumps({'submissions': records, 'count': len(records)}, indent=2),
        mimetype='application/json',
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )
