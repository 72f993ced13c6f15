"""Global HTTP error handling and JSON response helpers."""
from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException, InternalServerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(400)
    def bad_request(err: Exception):  # type: ignore[override]
        return jsonify({"error": "bad_request", "message": str(err)}), 400

    @app.errorhandler(404)
    def not_found(err: Exception):  # type: ignore[override]
        return jsonify({"error": "not_found", "message": str(err)}), 404

    @app.errorhandler(405)
    def method_not_allowed(err: Exception):  # type: ignore[override]
        return jsonify({"error": "method_not_allowed", "message": str(err)}), 405

    @app.errorhandler(ValidationError)
    def unprocessable(err: ValidationError):  # type: ignore[override]
        return jsonify({"error": "unprocessable_entity", "message": str(err)}), 422

    @app.errorhandler(500)
    def internal(err: Exception):  # type: ignore[override]
        original = err.original_exception if isinstance(err, InternalServerError) else err
        if original is not None and not isinstance(original, HTTPException):
            logger.error("Unhandled error", exc_info=original)
        return jsonify({"error": "internal_server_error", "message": "unexpected error"}), 500


def ok(data: Any, status: int = 200):
    return jsonify({"data": data}), status


def no_content():
    return "", 204
