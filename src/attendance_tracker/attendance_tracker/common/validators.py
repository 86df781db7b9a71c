from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from ..core.constants import PHONE_DIGITS
from ..core.exceptions import ValidationError

_PHONE_RE = re.compile(rf"^\d{{{PHONE_DIGITS}}}$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"Field '{field_name}' is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_fields(data: Mapping[str, Any], fields: Sequence[str]) -> None:
    """Presence check used by the JSON handlers (mirrors isset semantics)."""
    for field in fields:
        if data.get(field) is None:
            raise ValidationError(f"Field '{field}' is required")


def require_phone(value: str) -> str:
    value = require_non_empty(value, "phone")
    if not _PHONE_RE.match(value):
        raise ValidationError(f"Phone number must be exactly {PHONE_DIGITS} digits")
    return value


def require_email(value: str) -> str:
    value = require_non_empty(value, "email")
    if not _EMAIL_RE.match(value):
        raise ValidationError("Email address is not valid")
    return value


def require_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Field '{field_name}' must be an integer")


def require_latitude(value: Any, field_name: str = "latitude") -> float:
    lat = _as_float(value, field_name)
    if not -90.0 <= lat <= 90.0:
        raise ValidationError(f"Field '{field_name}' must be between -90 and 90")
    return lat


def require_longitude(value: Any, field_name: str = "longitude") -> float:
    lng = _as_float(value, field_name)
    if not -180.0 <= lng <= 180.0:
        raise ValidationError(f"Field '{field_name}' must be between -180 and 180")
    return lng


def _as_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field_name}' must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Field '{field_name}' must be a number")
