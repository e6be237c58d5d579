# user_dashboard/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from user_dashboard.core.exceptions import AppError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        if err.status_code >= 500:
            logger.error("request failed: %s", err, exc_info=err.__cause__ or err)
        return jsonify({"error": str(err)}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # mantém Allow (405), WWW-Authenticate etc.; o corpo passa a ser JSON
        headers = [(k, v) for k, v in err.get_headers() if k.lower() != "content-type"]
        return jsonify({"error": err.description}), err.code, headers

    # falha no commit/rollback, fora do service
    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(err: SQLAlchemyError):
        logger.error("unhandled store error", exc_info=err)
        return jsonify({"error": INTERNAL_ERROR}), 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.error("unhandled error", exc_info=err)
        return jsonify({"error": INTERNAL_ERROR}), 500
