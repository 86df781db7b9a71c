from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import WFHRequest


class WFHRequestRepository(Protocol):
    def create(self, *, employee_id: int, requested_date: date, reason: str) -> int:
        """Insert a pending request; (employee_id, requested_date) is unique."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[WFHRequest]:
        raise NotImplementedError
