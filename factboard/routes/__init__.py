import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException
from factboard.errors import ErrorCategory, ServiceError

logger = logging.getLogger(__name__)


def register_blueprints(app):
    from factboard.routes.health import health_bp
    from factboard.routes.facts import facts_bp
    from factboard.routes.ingestion import ingestion_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(facts_bp, url_prefix='/api/facts')
    app.register_blueprint(ingestion_bp, url_prefix='/api/ingestion')


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        logger.debug(f"Expected {type(e).__name__} while processing request: {e}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unexpected error while processing request")
        return jsonify({
            'category': ErrorCategory.ERROR.value,
            'title': 'Server error',
            'text': 'An unexpected error occurred',
        }), 500
