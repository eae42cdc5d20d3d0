# CORS configuration
from flask_cors import CORS


def configure_cors(app, origins):
    # Browser dashboards call the API directly; only listed origins are allowed
    CORS(app, resources={
        r"/api/*": {
            "origins": list(origins),
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization", "X-Requested-With"],
        }
    })
    return app
