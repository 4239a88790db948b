"""
Portfolio API - Main Application Entry Point
Application Factory Pattern: configuration, extensions and error handling
live here, all route handling is delegated to blueprints.
"""

import logging
import os
import sys
from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from config import get_config
from extensions import db, cors
from utils.converters import DigitsConverter
from utils.errors import APIError
from utils.responses import plain_error

from blueprints.api import api_bp

logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance

    Raises:
        SQLAlchemyError: If the database cannot be reached
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))

    # Must exist before blueprint routes are bound
    app.url_map.converters['digits'] = DigitsConverter

    # Keep envelope keys in declaration order
    app.json.sort_keys = False

    initialize_extensions(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    cors.init_app(
        app,
        resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}},
        methods=app.config['CORS_METHODS'],
        allow_headers=app.config['CORS_HEADERS'],
        supports_credentials=True,
    )

    # Create missing tables and verify the connection
    with app.app_context():
        db.create_all()
        db.session.execute(text('SELECT 1'))
    app.logger.info("✓ Database initialized successfully")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register error handlers - failures are answered in plain text"""

    @app.errorhandler(APIError)
    def api_error(e):
        return plain_error(e.message, e.status_code)

    @app.errorhandler(404)
    def page_not_found(e):
        return plain_error('404 page not found', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return plain_error('405 method not allowed', 405)

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return plain_error('Internal server error', 500)


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


def main():
    # The server entry point never defaults to debug mode
    config_name = os.environ.get('FLASK_ENV', 'production')
    conf = get_config(config_name)
    logging.basicConfig(
        level=conf.LOG_LEVEL,
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s')

    if not conf.SQLALCHEMY_DATABASE_URI:
        logger.error("DB_URL not set")
        sys.exit(1)

    try:
        app = create_app(config_name)
    except SQLAlchemyError as e:
        logger.error(f"Database unreachable: {str(e)}")
        sys.exit(1)

    app.logger.info("✅ Connected to database")
    app.logger.info(f"🚀 Server running on :{app.config['PORT']}")
    app.run(
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config.get('DEBUG', False)
    )


if __name__ == '__main__':
    main()
