"""Tessera — Flask application entry point."""
import logging
import logging.handlers
import os
import traceback

from flask import Flask, request as flask_request
from werkzeug.exceptions import HTTPException

from db.database import init_db
from routes.game import game_bp
from routes.dashboard import dashboard_bp
from routes.settings import settings_bp

# --- File logging with daily rotation, 3-day retention ---
LOG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'tessera_debug.log')

file_handler = logging.handlers.TimedRotatingFileHandler(
    LOG_FILE, when='midnight', backupCount=3, encoding='utf-8',
)
file_handler.setLevel(logging.DEBUG)
file_handler.setFormatter(logging.Formatter(
    '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
))

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[logging.StreamHandler(), file_handler],
)


def create_app():
    app = Flask(__name__)
    app.secret_key = os.environ.get('SECRET_KEY', 'tessera-dev-key')

    app.register_blueprint(game_bp, url_prefix='/game')
    app.register_blueprint(dashboard_bp, url_prefix='/dashboard')
    app.register_blueprint(settings_bp, url_prefix='/settings')

    @app.route('/')
    def health():
        return {'status': 'ok'}

    # --- Request/response logging ---
    req_logger = logging.getLogger('tessera.requests')

    @app.before_request
    def log_request():
        req_logger.info('>>> %s %s  bytes=%s', flask_request.method,
                        flask_request.full_path.rstrip('?'),
                        flask_request.content_length or 0)

    @app.after_request
    def log_response(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Content-Security-Policy'] = "default-src 'self'"
        req_logger.info('<<< %s %s  status=%d',
                        flask_request.method,
                        flask_request.full_path.rstrip('?'),
                        response.status_code)
        return response

    @app.errorhandler(Exception)
    def log_error(error):
        if isinstance(error, HTTPException):
            return error
        req_logger.error('!!! %s %s  EXCEPTION:\n%s',
                         flask_request.method,
                         flask_request.full_path.rstrip('?'),
                         traceback.format_exc())
        return {'error': 'Internal Server Error'}, 500

    with app.app_context():
        init_db()

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5002, threaded=True)
