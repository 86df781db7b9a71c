from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Office:
    """Domain entity: an office location with its geofence."""

    office_id: int
    name: str
    address: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    radius_meters: Optional[float]
    is_active: bool = True
    departments: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.office_id,
            "name": self.name,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius_meters": self.radius_meters,
            "is_active": self.is_active,
            "departments": list(self.departments),
        }


@dataclass(frozen=True)
class OfficeDraft:
    """Validated admin input for create/update."""

    name: str
    address: Optional[str]
    latitude: float
    longitude: float
    radius_meters: float
    is_active: bool = True
