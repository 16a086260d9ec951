from __future__ import annotations

from typing import Iterable, Sequence

from ..core.enums import WorkStatus
from ..events.model import DayBoundary, LoggedEvent, StatusChange
from ..staff.model import StaffMember, StaffStatus


def compute_status(member_id: int, events_before_point: Sequence[LoggedEvent]) -> WorkStatus:
    """Replay the log backwards to find a member's status at the end of ``events_before_point``.

    The newest StatusChange of this member decides. A DayBoundary reached first
    means the member has not signed in since the last reset, so they are Away.
    Members without any history are Away as well.
    """

    for logged in reversed(events_before_point):
        event = logged.event
        if isinstance(event, StatusChange) and event.member_id == member_id:
            return event.new_status
        if isinstance(event, DayBoundary):
            return WorkStatus.AWAY

    return WorkStatus.AWAY


def staff_with_status(
    members: Iterable[StaffMember],
    events_before_point: Sequence[LoggedEvent],
) -> list[StaffStatus]:
    return [
        StaffStatus(member=m, status=compute_status(m.member_id, events_before_point))
        for m in members
    ]
