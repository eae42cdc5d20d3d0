#!/usr/bin/env python3
"""
Flask API for BrandRadar.
Endpoints: editorial article visibility, AI prompt visibility, capability health check.
"""

from flask import Flask, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import logging
from functools import wraps

from brandradar.config import Settings
from brandradar.errors import ConfigurationError, UpstreamError
from brandradar.service import BrandRadarService
from cors_config import configure_cors

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def handle_pipeline_errors(f):
    """Map pipeline failures to a single JSON error payload"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ConfigurationError as e:
            logger.error(f"Configuration error in {f.__name__}: {e}")
            return jsonify({'error': str(e)}), 500
        except UpstreamError as e:
            logger.error(f"Upstream error in {f.__name__}: {e}")
            return jsonify({'error': str(e)}), 502
        except Exception as e:
            logger.error(f"Unexpected error in {f.__name__}: {e}", exc_info=True)
            return jsonify({'error': 'Internal server error'}), 500
    return decorated_function


def require_brand(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        brand = (request.args.get('brand') or '').strip()
        if not brand:
            return jsonify({'error': 'brand query param required'}), 400
        return f(brand, *args, **kwargs)
    return decorated_function


def create_app(settings: Settings = None, service: BrandRadarService = None) -> Flask:
    settings = settings or (service.settings if service else Settings.from_env())
    service = service or BrandRadarService(settings)

    app = Flask(__name__)
    configure_cors(app, settings.cors_origins)

    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=["500 per day", "60 per hour"],
        storage_uri="memory://"
    )
    limiter.init_app(app)

    @app.route('/api/articles')
    @handle_pipeline_errors
    @require_brand
    def get_articles(brand):
        result = service.get_articles(brand)
        logger.info(f"articles for '{brand}': {result['total']}")
        return jsonify(result)

    @app.route('/api/prompts')
    @limiter.limit("10 per minute")
    @handle_pipeline_errors
    @require_brand
    def get_prompts(brand):
        result = service.get_prompts(brand)
        logger.info(f"prompts for '{brand}': {result['total']}")
        return jsonify(result)

    @app.route('/api/health')
    @limiter.exempt
    def health_check():
        """Which external capabilities are configured"""
        return jsonify({'status': 'ok', **service.status()})

    return app


if __name__ == "__main__":
    _settings = Settings.from_env()
    create_app(_settings).run(host="0.0.0.0", port=_settings.api_port)
