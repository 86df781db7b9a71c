from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceType
from ..offices.repository import OfficeRepository
from ..wfh.service import WFHEligibilityService
from .strategies.base import CheckInStrategy
from .strategies.client_strategy import ClientCheckInStrategy
from .strategies.office_strategy import OfficeCheckInStrategy
from .strategies.wfh_strategy import WFHCheckInStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the check-in strategy for an attendance type."""

    eligibility: WFHEligibilityService
    offices: OfficeRepository

    def for_checkin(self, check_in_type: AttendanceType) -> CheckInStrategy:
        if check_in_type == AttendanceType.WFH:
            return WFHCheckInStrategy(self.eligibility)
        if check_in_type == AttendanceType.OFFICE:
            return OfficeCheckInStrategy(self.offices)
        return ClientCheckInStrategy()
