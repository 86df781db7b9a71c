"""JSON envelope helpers shared by the feature controllers.

Every response body is ``{"success": bool, "message": str, ...}``. Domain errors
map to a status code with their own message; store, configuration and
unexpected errors are logged and answered with a generic message.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    DomainError,
    NotFoundError,
    PolicyError,
    StoreError,
    ValidationError,
)
from .datetime_utils import parse_iso_date
from .validators import require_int

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
    (PolicyError, 422),
)


def success(status: int = 200, **payload: Any):
    return jsonify({"success": True, **payload}), status


def failure(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_endpoint(failure_message: str):
    """Convert exceptions raised by a view into the JSON failure envelope."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (StoreError, ConfigurationError):
                logger.exception("%s: %s %s", failure_message, request.method, request.path)
                return failure(failure_message, 500)
            except DomainError as e:
                for error_type, status in _STATUS_BY_ERROR:
                    if isinstance(e, error_type):
                        return failure(str(e), status)
                logger.exception("Unmapped domain error on %s", request.path)
                return failure(failure_message, 500)
            except Exception:
                logger.exception("Unhandled error on %s %s", request.method, request.path)
                return failure(failure_message, 500)

        return wrapper

    return decorator


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return failure("Login required", 401)
        if session.get("role") != Role.ADMIN.value:
            return failure("Admin access required", 403)
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    if not request.get_data(cache=True).strip():
        return {}
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON input")
    return data


def query_int(name: str, *, required: bool = False) -> Optional[int]:
    raw = request.args.get(name, "").strip()
    if not raw:
        if required:
            raise ValidationError(f"Parameter '{name}' is required")
        return None
    return require_int(raw, name)


def query_date(name: str):
    raw = request.args.get(name, "").strip()
    return parse_iso_date(raw) if raw else None
