from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Office, OfficeDraft


class OfficeRepository(Protocol):
    def get_by_id(self, office_id: int) -> Optional[Office]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Office]:
        raise NotImplementedError

    def list_accessible(self, department: str) -> Sequence[Office]:
        """Active offices granted to ``department``."""

        raise NotImplementedError

    def create_with_access(self, draft: OfficeDraft, departments: Sequence[str]) -> int:
        """Insert the office and its department grants in one transaction."""

        raise NotImplementedError

    def update(self, office_id: int, draft: OfficeDraft, departments: Optional[Sequence[str]] = None) -> bool:
        """Update the office; when ``departments`` is given, replace its grants atomically."""

        raise NotImplementedError

    def set_active(self, office_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
