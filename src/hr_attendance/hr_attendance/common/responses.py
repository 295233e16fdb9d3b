"""JSON envelope helpers shared by the controllers.

Every response is ``{success, data?, error?, count?, message?}``.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import jsonify, request

from ..core.enums import ErrorKind
from ..core.exceptions import DomainError, DuplicateError, ValidationError

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.DUPLICATE: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


def success(
    data: Any = None,
    *,
    status: int = 200,
    message: Optional[str] = None,
    count: Optional[int] = None,
    **extra: Any,
):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if count is not None:
        body["count"] = count
    body.update(extra)
    body["data"] = data
    return jsonify(body), status


def failure(error: DomainError):
    body: dict[str, Any] = {"success": False, "error": error.message}
    if isinstance(error, ValidationError):
        body["details"] = [{"field": e.field, "message": e.message} for e in error.errors]
    if isinstance(error, DuplicateError):
        body["field"] = error.field
    return jsonify(body), STATUS_BY_KIND[error.kind]


def error_response(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def json_body() -> dict:
    """Request JSON object; anything else (missing, list, invalid) counts as empty."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}
