from __future__ import annotations

from datetime import datetime

from src.timeclock.timeclock.core.enums import WorkStatus
from src.timeclock.timeclock.events.model import DayBoundary, Info, LoggedEvent, StatusChange
from src.timeclock.timeclock.staff.model import StaffMember
from src.timeclock.timeclock.timetrack.status import compute_status, staff_with_status


def _log(*events):
    return [
        LoggedEvent(event_id=i, created_at=datetime(2024, 3, 1, 8, 0, i), event=e)
        for i, e in enumerate(events, start=1)
    ]


def test_no_history_means_away():
    assert compute_status(1, []) is WorkStatus.AWAY


def test_latest_status_change_wins():
    log = _log(
        StatusChange(1, "Aaron", WorkStatus.WORKING),
        StatusChange(1, "Aaron", WorkStatus.AWAY),
        StatusChange(1, "Aaron", WorkStatus.WORKING),
        Info("unrelated"),
    )
    assert compute_status(1, log) is WorkStatus.WORKING


def test_other_members_do_not_count():
    log = _log(StatusChange(2, "Beeron", WorkStatus.WORKING))
    assert compute_status(1, log) is WorkStatus.AWAY


def test_day_boundary_resets_to_away():
    log = _log(StatusChange(1, "Aaron", WorkStatus.WORKING), DayBoundary())
    assert compute_status(1, log) is WorkStatus.AWAY


def test_sign_in_after_day_boundary():
    log = _log(DayBoundary(), StatusChange(1, "Aaron", WorkStatus.WORKING))
    assert compute_status(1, log) is WorkStatus.WORKING


def test_staff_with_status_keeps_member_order():
    aaron = StaffMember(member_id=1, name="Aaron", pin="1111", card_id="1111111111")
    beeron = StaffMember(member_id=2, name="Beeron", pin="2222", card_id="2222222222")
    log = _log(StatusChange(2, "Beeron", WorkStatus.WORKING))

    entries = staff_with_status([aaron, beeron], log)

    assert [e.member.name for e in entries] == ["Aaron", "Beeron"]
    assert [e.status for e in entries] == [WorkStatus.AWAY, WorkStatus.WORKING]
    assert entries[1].to_dict() == {
        "member_id": 2,
        "name": "Beeron",
        "is_visible": True,
        "status": "working",
    }
