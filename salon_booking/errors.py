from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from salon_booking.utils.json_utils import camelize_keys


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response"""
    status_code = 500
    message = 'An error occurred.'

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.errors = errors

    def to_dict(self):
        body = {'message': self.message}
        if self.errors:
            body['errors'] = camelize_keys(self.errors)
        return body


class ValidationError(ApiError):
    """Malformed or incomplete payload; errors maps field names to messages"""
    status_code = 400
    message = 'Invalid data'


class NotFoundError(ApiError):
    status_code = 404
    message = 'Not found'


class ConflictError(ApiError):
    status_code = 409
    message = 'Conflict'


class AuthenticationError(ApiError):
    status_code = 401
    message = 'Authentication required'


class AuthorizationError(ApiError):
    status_code = 403
    message = 'Invalid or expired token'


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"API error: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception(f"Unhandled error: {error}")
        return jsonify({'message': ApiError.message}), 500
