import logging
from datetime import datetime, timezone

from flask import jsonify, request
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from portfolio_api.extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    message = "An error occurred while processing your request"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request parameters"


class Forbidden(ApiError):
    status_code = 403
    message = "Insufficient permissions"


class NotFoundError(ApiError):
    status_code = 404
    message = "Resource not found"


class ConflictError(ApiError):
    status_code = 409
    message = "Invalid operation"


# First match wins; subclasses must precede their bases.
STATUS_TABLE = (
    (IntegrityError, 409, "Invalid operation"),
    (PermissionError, 403, "Access denied"),
    (LookupError, 404, "Resource not found"),
    (ValueError, 400, "Invalid request parameters"),
    (TypeError, 400, "Required parameter is missing or malformed"),
)

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request"


def error_response(status_code, message):
    response = jsonify({
        "error": {
            "message": message,
            "statusCode": status_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": request.path,
        }
    })
    response.status_code = status_code
    return response


def resolve_status(error):
    for exc_type, status_code, message in STATUS_TABLE:
        if isinstance(error, exc_type):
            return status_code, message
    return 500, INTERNAL_ERROR_MESSAGE


def register_error_handlers(app):
    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        # Domain lookups keep the short {"error": "<Entity> not found"} body
        return jsonify({"error": error.message}), 404

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        logger.warning(
            "%s on %s %s: %s",
            type(error).__name__, request.method, request.path, error.message
        )
        return error_response(error.status_code, error.message)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.code or 500, error.name)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, IntegrityError):
            db.session.rollback()

        status_code, message = resolve_status(error)

        if status_code >= 500:
            logger.error(
                "Unhandled exception on %s %s: %s",
                request.method, request.path, error,
                exc_info=error,
            )
        else:
            logger.warning(
                "%s on %s %s: %s",
                type(error).__name__, request.method, request.path, error
            )

        return error_response(status_code, message)
