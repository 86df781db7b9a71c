from __future__ import annotations

from ...core.exceptions import OfficeNotFoundError, ValidationError
from ...offices.repository import OfficeRepository
from ..model import NewCheckIn
from .base import CheckInStrategy


class OfficeCheckInStrategy(CheckInStrategy):
    """Office attendance must name an existing, active office."""

    def __init__(self, offices: OfficeRepository):
        self._offices = offices

    def validate_checkin(self, draft: NewCheckIn) -> None:
        if draft.office_id is None:
            raise ValidationError("Field 'office_id' is required for office attendance")

        office = self._offices.get_by_id(draft.office_id)
        if not office or not office.is_active:
            raise OfficeNotFoundError("Office not found")
