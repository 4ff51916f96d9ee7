# app/__init__.py

import logging
import os
import time
from flask import Flask, request
from flask_cors import CORS
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from .config import Config
from db.extensions import db, migrate, check_redis_health
from controllers.registration_controller import registration_bp
from controllers.verification_controller import verification_bp


def create_app(config_class=Config):
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_class)

    CORS(app,
         origins=app.config['CORS_ORIGINS'],
         methods=['GET', 'POST', 'OPTIONS'],
         allow_headers=['Content-Type'],
         max_age=3600
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Register blueprints
    app.register_blueprint(registration_bp, url_prefix='/api')
    app.register_blueprint(verification_bp, url_prefix='/api')

    # Configure logging
    debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"
    log_level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app.logger.setLevel(log_level)

    # Request timing middleware
    @app.before_request
    def before_request():
        request.start_time = time.time()
        if debug_mode:
            app.logger.debug(f"Started {request.method} {request.path}")

    @app.after_request
    def after_request(response):
        if hasattr(request, 'start_time'):
            elapsed = (time.time() - request.start_time) * 1000

            # Log slow requests (over 500ms)
            if elapsed > 500:
                app.logger.warning(
                    f"SLOW REQUEST: {request.method} {request.path} "
                    f"took {elapsed:.2f}ms - Status: {response.status_code}"
                )
            elif debug_mode:
                app.logger.info(
                    f"{request.method} {request.path} "
                    f"took {elapsed:.2f}ms - Status: {response.status_code}"
                )

        return response

    # Global error handler
    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return {
                'success': False,
                'error': e.description
            }, e.code
        app.logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return {
            'success': False,
            'error': 'Internal server error'
        }, 500

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint for monitoring"""
        try:
            db.session.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            app.logger.error(f"Health check failed: {str(e)}")
            return {
                'status': 'error',
                'database': 'unreachable',
                'timestamp': time.time()
            }, 500

        return {
            'status': 'ok',
            'database': 'connected',
            'redis': 'connected' if check_redis_health() else 'unreachable',
            'timestamp': time.time()
        }, 200

    return app
