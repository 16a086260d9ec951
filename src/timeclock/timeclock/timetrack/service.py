from __future__ import annotations

from datetime import datetime

from ..common.logger import get_logger
from ..core.enums import WorkStatus
from ..core.exceptions import ValidationError
from ..events.model import EventOver, StatusChange
from ..events.repository import EventLog
from ..staff.model import StaffMember, StaffStatus
from ..staff.repository import StaffDirectory
from ..staff.service import StaffService
from .status import compute_status, staff_with_status


class TimetrackService:
    """Use case: status board and sign in / sign off by PIN or card."""

    def __init__(self, events: EventLog, staff: StaffDirectory, staff_service: StaffService):
        self._events = events
        self._staff = staff
        self._staff_service = staff_service
        self._logger = get_logger("timeclock.timetrack")

    def current_staff(self, now: datetime) -> list[StaffStatus]:
        members = self._staff.load_active_members()
        previous = self._events.load_between(None, now)
        return staff_with_status(members, previous)

    def status_of(self, member: StaffMember, now: datetime) -> WorkStatus:
        return compute_status(member.member_id, self._events.load_between(None, now))

    def toggle(self, ident: str, now: datetime) -> StaffStatus:
        member = self._staff_service.find_by_ident(ident)
        if not member:
            raise ValidationError(f'No staff member found for "{(ident or "").strip()}"')

        new_status = self.status_of(member, now).toggle()
        self._events.append(StatusChange(member.member_id, member.name, new_status), created_at=now)
        self._logger.info(f"{member.name} is now {new_status.label}")
        return StaffStatus(member=member, status=new_status)

    def sign_off_all(self, at: datetime) -> list[StaffMember]:
        """Write an Away status change for every member who is currently working."""
        signed_off: list[StaffMember] = []
        for entry in self.current_staff(at):
            if not entry.is_working:
                continue
            member = entry.member
            self._events.append(StatusChange(member.member_id, member.name, WorkStatus.AWAY), created_at=at)
            signed_off.append(member)

        if signed_off:
            self._logger.info(f"Signed off {len(signed_off)} staff member(s) at {at:%Y-%m-%d %H:%M:%S}")
        return signed_off

    def end_event(self, now: datetime) -> list[StaffMember]:
        signed_off = self.sign_off_all(now)
        self._events.append(EventOver(), created_at=now)
        return signed_off
