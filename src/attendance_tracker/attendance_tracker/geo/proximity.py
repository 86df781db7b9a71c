"""Geofence math: great-circle distance and office radius checks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Protocol

from ..core.constants import EARTH_RADIUS_METERS
from ..core.exceptions import ConfigurationError


class GeoFence(Protocol):
    latitude: Optional[float]
    longitude: Optional[float]
    radius_meters: Optional[float]


@dataclass(frozen=True)
class ProximityResult:
    distance: float
    in_range: bool


def distance_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine distance on a spherical Earth (radius 6,371 km).

    Inputs are signed decimal degrees; range checking is the caller's job.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def is_within_radius(user_lat: float, user_lng: float, office: GeoFence) -> ProximityResult:
    if office.radius_meters is None:
        raise ConfigurationError("Office radius is not configured")
    if office.latitude is None or office.longitude is None:
        raise ConfigurationError("Office coordinates are not configured")

    distance = distance_meters(float(user_lat), float(user_lng), float(office.latitude), float(office.longitude))
    return ProximityResult(distance=distance, in_range=distance <= float(office.radius_meters))
