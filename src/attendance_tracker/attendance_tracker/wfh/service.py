from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_WFH_MONTHLY_LIMIT
from ..core.enums import AttendanceType
from ..core.exceptions import ConflictError, DuplicateRecordError, ValidationError, WFHLimitExceededError
from .model import WFHEligibility, WFHRequest
from .repository import WFHRequestRepository

logger = logging.getLogger(__name__)


class WFHEligibilityService:
    """Monthly work-from-home quota.

    Counts ``wfh`` attendance records in the calendar month that contains the
    given date; ``max_limit`` comes from settings (WFH_MONTHLY_LIMIT).
    """

    def __init__(self, attendance, *, max_limit: int = DEFAULT_WFH_MONTHLY_LIMIT):
        self._attendance = attendance
        self._max_limit = int(max_limit)

    def check_eligibility(self, employee_id: int, work_date: date) -> WFHEligibility:
        if not isinstance(work_date, date):
            raise ValidationError("Field 'date' must be a date")

        count = self._attendance.count_by_type_in_month(
            employee_id=int(employee_id),
            check_in_type=AttendanceType.WFH,
            year=work_date.year,
            month=work_date.month,
        )
        return WFHEligibility(current_count=count, max_limit=self._max_limit, can_request=count < self._max_limit)


class WFHRequestService:
    """Use case: employees file WFH requests; listing their own history."""

    def __init__(self, requests: WFHRequestRepository, eligibility: WFHEligibilityService):
        self._requests = requests
        self._eligibility = eligibility

    def create_request(self, *, employee_id: int, requested_date: date, reason: str) -> int:
        reason = require_non_empty(reason, "reason")

        eligibility = self._eligibility.check_eligibility(employee_id, requested_date)
        if not eligibility.can_request:
            raise WFHLimitExceededError("WFH limit exceeded for this month")

        try:
            request_id = self._requests.create(
                employee_id=int(employee_id),
                requested_date=requested_date,
                reason=reason,
            )
        except DuplicateRecordError:
            raise ConflictError("A WFH request already exists for this date")

        logger.info("WFH request %s filed by employee %s for %s", request_id, employee_id, requested_date)
        return request_id

    def list_requests(self, employee_id: int) -> Sequence[WFHRequest]:
        return self._requests.list_for_employee(int(employee_id))
