from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.timeclock.timeclock.events.model import LoggedEvent
from src.timeclock.timeclock.staff.model import StaffMember


class InMemoryEventLog:
    def __init__(self):
        self.events: list[LoggedEvent] = []
        self._id = 0

    def append(self, event, *, created_at: Optional[datetime] = None) -> LoggedEvent:
        self._id += 1
        logged = LoggedEvent(event_id=self._id, created_at=created_at or datetime.now(), event=event)
        self.events.append(logged)
        return logged

    def load_between(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        items = [
            e
            for e in self.events
            if (start is None or e.created_at >= start) and (end is None or e.created_at < end)
        ]
        items.sort(key=lambda e: e.sort_key)
        return items


class InMemoryStaff:
    def __init__(self):
        self._by_id: dict[int, StaffMember] = {}
        self._id = 0

    def load_active_members(self):
        return [m for _, m in sorted(self._by_id.items()) if m.is_active]

    def get_by_id(self, member_id: int) -> Optional[StaffMember]:
        return self._by_id.get(member_id)

    def create(self, *, name: str, pin: str, card_id: str) -> StaffMember:
        self._id += 1
        member = StaffMember(member_id=self._id, name=name, pin=pin, card_id=card_id)
        self._by_id[self._id] = member
        return member

    def save(self, member: StaffMember) -> bool:
        if member.member_id not in self._by_id:
            return False
        self._by_id[member.member_id] = member
        return True

    def deactivate(self, member_id: int) -> bool:
        member = self._by_id.get(member_id)
        if not member or not member.is_active:
            return False
        self._by_id[member_id] = member.with_changes(is_active=False, pin=None, card_id=None)
        return True


class InMemoryPasswords:
    def __init__(self):
        self.hashes: list[str] = []

    def list_hashes(self):
        return list(self.hashes)

    def add_hash(self, phc: str) -> int:
        self.hashes.append(phc)
        return len(self.hashes)


@pytest.fixture
def event_log() -> InMemoryEventLog:
    return InMemoryEventLog()


@pytest.fixture
def staff_repo() -> InMemoryStaff:
    return InMemoryStaff()


@pytest.fixture
def passwords_repo() -> InMemoryPasswords:
    return InMemoryPasswords()


@pytest.fixture
def aaron(staff_repo) -> StaffMember:
    return staff_repo.create(name="Aaron", pin="1111", card_id="1111111111")


@pytest.fixture
def beeron(staff_repo, aaron) -> StaffMember:
    return staff_repo.create(name="Beeron", pin="2222", card_id="2222222222")
