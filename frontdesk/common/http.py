from __future__ import annotations

from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AlreadyRespondedError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ValidationError, 400),
    (ConflictError, 400),
    (AlreadyRespondedError, 400),
)


def json_body() -> dict[str, Any]:
    """Request JSON object, or ValidationError when the body is not one."""

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def query_arg(name: str) -> Optional[str]:
    value = request.args.get(name, "").strip()
    return value or None


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(error, cls)), 400)
        return jsonify({"error": str(error)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"error": error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        app.logger.exception("Unhandled error on %s %s: %s", request.method, request.path, error)
        return jsonify({"error": "Internal server error"}), 500
