"""
API error types and their JSON error handlers.
"""

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
import logging

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors surfaced to the client as JSON."""

    status_code = 500
    message = 'Server error'

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ApiError):
    status_code = 400
    message = 'Invalid request'


class AuthRequiredError(ApiError):
    status_code = 401
    message = 'Access denied'


class UnauthorizedError(ApiError):
    status_code = 401
    message = 'Invalid username or password'


class InvalidTokenError(ApiError):
    status_code = 403
    message = 'Invalid token'


class NotFoundError(ApiError):
    status_code = 404
    message = 'Not found'


class ConflictError(ApiError):
    status_code = 409
    message = 'Username or email already exists'


class StorageError(ApiError):
    status_code = 500
    message = 'Database error'


def register_error_handlers(app):
    """Render every error as {"message": ...} with the matching status code."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify({'message': error.message}), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        logger.error(f"Unhandled database error: {error}", exc_info=True)
        return jsonify({'message': StorageError.message}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'message': error.description}), error.code
