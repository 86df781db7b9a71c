from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import WFHRequestStatus


@dataclass(frozen=True)
class WFHEligibility:
    current_count: int
    max_limit: int
    can_request: bool

    def to_dict(self) -> dict:
        return {
            "current_count": self.current_count,
            "max_limit": self.max_limit,
            "can_request": self.can_request,
        }


@dataclass(frozen=True)
class WFHRequest:
    """Employee request for a work-from-home day (approval happens elsewhere)."""

    request_id: int
    employee_id: int
    requested_date: date
    reason: str
    status: WFHRequestStatus
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "employee_id": self.employee_id,
            "requested_date": self.requested_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(sep=" "),
        }
