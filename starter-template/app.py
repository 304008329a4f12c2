"""
CMSDesk Starter Template
========================

A ready-to-run Flask application with every CMSDesk screen enabled and
the demo content loaded.

Run with:
    python app.py

Visit:
    http://localhost:5000/admin              - Admin API (login first)
    http://localhost:5000/api/content/team   - Public content API
    http://localhost:5000/health             - Health check
"""

from flask import Flask, jsonify
from cmsdesk import CMSDesk
from cmsdesk.core.config import Config

# Create Flask app
app = Flask(__name__)

# Initialize CMSDesk - this registers all modules automatically
cmsdesk = CMSDesk(app, {'brand_name': Config.BRAND_NAME})


# =============================================================================
# Your Routes - Add your own routes below
# =============================================================================

@app.route('/')
def index():
    """Homepage"""
    return jsonify({'site': cmsdesk.brand_name, 'modules': cmsdesk.get_registered_modules()})


# =============================================================================
# Run the app
# =============================================================================

if __name__ == '__main__':
    print("\n" + "=" * 60)
    print(f"{cmsdesk.brand_name} (CMSDesk)")
    print("=" * 60)
    print(f"Admin API:       http://localhost:{Config.port}/admin")
    print(f"Admin Login:     POST http://localhost:{Config.port}/admin/login")
    print(f"Public Content:  http://localhost:{Config.port}/api/content/team")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.port, debug=True)
