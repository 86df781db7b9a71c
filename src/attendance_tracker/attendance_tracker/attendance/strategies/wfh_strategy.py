from __future__ import annotations

import logging

from ...core.exceptions import WFHLimitExceededError
from ...wfh.service import WFHEligibilityService
from ..model import NewCheckIn
from .base import CheckInStrategy

logger = logging.getLogger(__name__)


class WFHCheckInStrategy(CheckInStrategy):
    """Work-from-home days are limited by the monthly quota."""

    def __init__(self, eligibility: WFHEligibilityService):
        self._eligibility = eligibility

    def validate_checkin(self, draft: NewCheckIn) -> None:
        result = self._eligibility.check_eligibility(draft.employee_id, draft.work_date)
        if not result.can_request:
            logger.warning(
                "WFH rejected for employee %s on %s (%s/%s used)",
                draft.employee_id,
                draft.work_date,
                result.current_count,
                result.max_limit,
            )
            raise WFHLimitExceededError("WFH limit exceeded for this month")
