from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceType
from .model import AttendanceRecord, Location, MonthlyStats, NewCheckIn


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, draft: NewCheckIn) -> int:
        """Insert the check-in row.

        The (employee_id, work_date) unique key rejects a second row with
        DuplicateRecordError.
        """

        raise NotImplementedError

    def complete_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        location: Optional[Location],
        photo: Optional[str],
        work_hours: float,
        is_half_day: bool,
    ) -> bool:
        """Close an open record; returns False if it was already closed."""

        raise NotImplementedError

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_by_type_in_month(self, *, employee_id: int, check_in_type: AttendanceType, year: int, month: int) -> int:
        raise NotImplementedError

    def get_monthly_stats(self, *, employee_id: int, year: int, month: int) -> Optional[MonthlyStats]:
        raise NotImplementedError
