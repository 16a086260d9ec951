from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import WorkStatus


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a staff member as stored in the directory.

    Note: there is deliberately no status field here; see ``StaffStatus``.
    """

    member_id: int
    name: str
    pin: Optional[str]
    card_id: Optional[str]
    is_visible: bool = True
    is_active: bool = True

    def matches(self, ident: str) -> bool:
        """PINs and card IDs have different lengths, so one ident matches at most one of them."""
        return ident in (self.pin, self.card_id)

    def with_changes(self, **changes) -> "StaffMember":
        return replace(self, **changes)


@dataclass(frozen=True)
class StaffStatus:
    """Read-model: a member together with the status replayed from the event log."""

    member: StaffMember
    status: WorkStatus

    @property
    def is_working(self) -> bool:
        return self.status is WorkStatus.WORKING

    def to_dict(self) -> dict:
        return {
            "member_id": self.member.member_id,
            "name": self.member.name,
            "is_visible": self.member.is_visible,
            "status": self.status.value,
        }
