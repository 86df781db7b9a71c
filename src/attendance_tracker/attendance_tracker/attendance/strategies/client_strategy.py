from __future__ import annotations

from ..model import NewCheckIn
from .base import CheckInStrategy


class ClientCheckInStrategy(CheckInStrategy):
    """Client-site visits: no extra rule, office and location are optional."""

    def validate_checkin(self, draft: NewCheckIn) -> None:
        return None
