"""JSON codec for the location columns.

Locations are stored as ``{"latitude": .., "longitude": .., "accuracy": ..}``
text and decoded back into :class:`Location` on every read.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from ..common.validators import require_latitude, require_longitude
from ..core.exceptions import ValidationError
from .model import Location


def parse_location(value: Any) -> Optional[Location]:
    """Build a Location from request JSON; ``None`` means no location supplied."""

    if value is None:
        return None
    if isinstance(value, Location):
        return value
    if not isinstance(value, dict):
        raise ValidationError("Location must be an object with latitude and longitude")

    lat = value.get("latitude", value.get("lat"))
    lng = value.get("longitude", value.get("lng"))
    if lat is None or lng is None:
        raise ValidationError("Location must include latitude and longitude")

    accuracy = value.get("accuracy")
    try:
        accuracy_f = float(accuracy) if accuracy is not None else None
    except (TypeError, ValueError):
        raise ValidationError("Location accuracy must be a number")

    return Location(latitude=require_latitude(lat), longitude=require_longitude(lng), accuracy=accuracy_f)


def encode_location(location: Optional[Location]) -> Optional[str]:
    if location is None:
        return None
    return json.dumps(location.to_dict())


def decode_location(raw: Any) -> Optional[Location]:
    """Decode a stored column value; empty or unreadable values decode to None."""

    if raw is None or raw == "":
        return None
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            return None
    if not isinstance(raw, dict) or raw.get("latitude") is None or raw.get("longitude") is None:
        return None

    accuracy = raw.get("accuracy")
    return Location(
        latitude=float(raw["latitude"]),
        longitude=float(raw["longitude"]),
        accuracy=float(accuracy) if accuracy is not None else None,
    )
