from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..common.validators import require_latitude, require_longitude, require_non_empty
from ..core.exceptions import OfficeNotFoundError, ValidationError
from ..geo.proximity import is_within_radius
from .model import Office, OfficeDraft
from .repository import OfficeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationCheck:
    distance: float
    in_range: bool
    office: Office

    def to_dict(self) -> dict:
        return {
            "distance": round(self.distance, 2),
            "in_range": self.in_range,
            "office_location": {
                "latitude": self.office.latitude,
                "longitude": self.office.longitude,
                "radius_meters": self.office.radius_meters,
            },
        }


class OfficeService:
    """Use cases: office lookup for employees, geofence check, admin office CRUD."""

    def __init__(self, offices: OfficeRepository):
        self._offices = offices

    def accessible_offices(self, department: str) -> Sequence[Office]:
        department = require_non_empty(department, "department")
        return self._offices.list_accessible(department)

    def get_office(self, office_id: int) -> Office:
        office = self._offices.get_by_id(int(office_id))
        if not office:
            raise OfficeNotFoundError("Office not found")
        return office

    def list_all(self) -> Sequence[Office]:
        return self._offices.list_all()

    def check_location(self, latitude: Any, longitude: Any, office_id: int) -> LocationCheck:
        lat = require_latitude(latitude)
        lng = require_longitude(longitude)
        office = self.get_office(office_id)

        result = is_within_radius(lat, lng, office)
        return LocationCheck(distance=result.distance, in_range=result.in_range, office=office)

    def create_office(self, data: dict) -> int:
        draft = self._draft_from(data)
        departments = self._departments_from(data.get("departments"))

        office_id = self._offices.create_with_access(draft, departments)
        logger.info("Office %s created (%s) with access for %s", office_id, draft.name, departments or "no departments")
        return office_id

    def update_office(self, office_id: int, data: dict) -> None:
        draft = self._draft_from(data)
        departments: Optional[list[str]] = None
        if "departments" in data:
            departments = self._departments_from(data.get("departments"))

        if not self._offices.update(int(office_id), draft, departments):
            raise OfficeNotFoundError("Office not found")
        logger.info("Office %s updated", office_id)

    def deactivate_office(self, office_id: int) -> None:
        self.get_office(office_id)
        self._offices.set_active(int(office_id), is_active=False)
        logger.info("Office %s deactivated", office_id)

    @staticmethod
    def _draft_from(data: dict) -> OfficeDraft:
        name = data.get("name")
        if not name or not str(name).strip():
            raise ValidationError("Office name is required")

        radius_raw = data.get("radius_meters", data.get("radius"))
        if radius_raw is None:
            raise ValidationError("Field 'radius_meters' is required")
        try:
            radius = float(radius_raw)
        except (TypeError, ValueError):
            raise ValidationError("Field 'radius_meters' must be a number")
        if radius <= 0:
            raise ValidationError("Field 'radius_meters' must be positive")

        if data.get("latitude") is None or data.get("longitude") is None:
            raise ValidationError("Office coordinates are required")

        address = data.get("address")
        is_active = data.get("is_active", True)
        return OfficeDraft(
            name=str(name).strip(),
            address=str(address).strip() if address else None,
            latitude=require_latitude(data.get("latitude")),
            longitude=require_longitude(data.get("longitude")),
            radius_meters=radius,
            is_active=_as_flag(is_active),
        )

    @staticmethod
    def _departments_from(value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValidationError("Field 'departments' must be a list")

        out: list[str] = []
        for d in value:
            name = str(d or "").strip()
            if name and name not in out:
                out.append(name)
        return out


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)
