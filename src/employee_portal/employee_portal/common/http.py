from __future__ import annotations

from flask import Flask, jsonify, request
from mysql.connector import Error as MySQLError

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    StateConflictError,
    ValidationError,
)


def request_json() -> dict:
    """JSON object body of the current request, {} when there is none."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    """Map the domain exception taxonomy onto JSON error responses."""

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return error_response(str(e), 400)

    @app.errorhandler(StateConflictError)
    def _state_conflict(e: StateConflictError):
        return error_response(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return error_response(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return error_response(str(e), 403)

    @app.errorhandler(MySQLError)
    def _store(e: MySQLError):
        # Surfaced verbatim; the front end shows it as-is.
        app.logger.exception("Store error")
        return error_response(str(e), 500)
