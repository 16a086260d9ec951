from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StaffMember


class StaffDirectory(Protocol):
    """Repository interface for staff records."""

    def load_active_members(self) -> Sequence[StaffMember]:
        """Active members ordered by id (this is also the report row order)."""

        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[StaffMember]:
        raise NotImplementedError

    def create(self, *, name: str, pin: str, card_id: str) -> StaffMember:
        raise NotImplementedError

    def save(self, member: StaffMember) -> bool:
        raise NotImplementedError

    def deactivate(self, member_id: int) -> bool:
        """Soft delete: clear PIN and card ID, flip ``is_active``; the row stays."""

        raise NotImplementedError
