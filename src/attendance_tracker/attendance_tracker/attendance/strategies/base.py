from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import NewCheckIn


class CheckInStrategy(ABC):
    """Strategy Pattern: per attendance type rules checked before a check-in is written."""

    @abstractmethod
    def validate_checkin(self, draft: NewCheckIn) -> None:
        """Raise a DomainError when ``draft`` is not allowed; return silently otherwise."""

        raise NotImplementedError
