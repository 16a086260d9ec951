from __future__ import annotations

from datetime import datetime

import pytest

from src.timeclock.timeclock.core.enums import AnomalyKind, WorkStatus
from src.timeclock.timeclock.core.exceptions import EvaluationError
from src.timeclock.timeclock.events.model import (
    DayBoundary,
    EventOver,
    Info,
    LoggedEvent,
    StatusChange,
)
from src.timeclock.timeclock.staff.model import StaffMember
from src.timeclock.timeclock.statistics.processor import EventProcessor

AARON = StaffMember(member_id=1, name="Aaron", pin="1111", card_id="1111111111")
BEERON = StaffMember(member_id=2, name="Beeron", pin="2222", card_id="2222222222")

PERIOD_END = datetime(2024, 4, 1, 6, 0)


def _feed(processor, events):
    for event_id, (at, event) in enumerate(events, start=1):
        processor.process(LoggedEvent(event_id=event_id, created_at=at, event=event))
    return processor.finish()


def _change(member, status):
    return StatusChange(member_id=member.member_id, member_name=member.name, new_status=status)


def test_simple_shift():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END),
        [
            (datetime(2024, 3, 1, 18, 0), _change(AARON, WorkStatus.WORKING)),
            (datetime(2024, 3, 1, 20, 30), _change(AARON, WorkStatus.AWAY)),
        ],
    )
    assert result.duration.minutes() == (150, 0, 0)
    assert result.anomalies == ()


def test_forgotten_sign_off_is_closed_by_day_boundary():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END),
        [
            (datetime(2024, 3, 1, 18, 0), _change(AARON, WorkStatus.WORKING)),
            (datetime(2024, 3, 2, 5, 59, 59), DayBoundary()),
        ],
    )
    assert result.duration.minutes() == (240, 120, 359)
    assert [a.kind for a in result.anomalies] == [AnomalyKind.STILL_WORKING_AT_BOUNDARY]
    assert result.anomalies[0].timestamp == datetime(2024, 3, 2, 5, 59, 59)
    assert "Aaron" in result.anomalies[0].message


def test_double_sign_on_keeps_first_start():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END),
        [
            (datetime(2024, 3, 5, 8, 0), _change(AARON, WorkStatus.WORKING)),
            (datetime(2024, 3, 5, 9, 0), _change(AARON, WorkStatus.WORKING)),
            (datetime(2024, 3, 5, 12, 0), _change(AARON, WorkStatus.AWAY)),
        ],
    )
    assert result.duration.minutes() == (240, 0, 0)
    assert len(result.anomalies) == 1
    assert result.anomalies[0].kind is AnomalyKind.ALREADY_WORKING
    assert result.anomalies[0].timestamp == datetime(2024, 3, 5, 9, 0)


def test_sign_off_while_away_is_reported():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END),
        [(datetime(2024, 3, 5, 8, 0), _change(AARON, WorkStatus.AWAY))],
    )
    assert result.duration.minutes() == (0, 0, 0)
    assert [a.kind for a in result.anomalies] == [AnomalyKind.ALREADY_AWAY]


def test_event_over_while_working_is_reported_but_keeps_working():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END),
        [
            (datetime(2024, 3, 5, 20, 0), _change(AARON, WorkStatus.WORKING)),
            (datetime(2024, 3, 5, 21, 0), EventOver()),
            (datetime(2024, 3, 5, 23, 0), _change(AARON, WorkStatus.AWAY)),
        ],
    )
    assert result.duration.minutes() == (120, 60, 0)
    assert [a.kind for a in result.anomalies] == [AnomalyKind.OVER_WHILE_WORKING]


def test_other_members_and_info_are_ignored():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END),
        [
            (datetime(2024, 3, 5, 8, 0), _change(BEERON, WorkStatus.WORKING)),
            (datetime(2024, 3, 5, 9, 0), Info("hello")),
            (datetime(2024, 3, 5, 10, 0), _change(BEERON, WorkStatus.AWAY)),
            (datetime(2024, 3, 6, 5, 59, 59), DayBoundary()),
            (datetime(2024, 3, 6, 7, 0), EventOver()),
        ],
    )
    assert result.duration.minutes() == (0, 0, 0)
    assert result.anomalies == ()


def test_working_at_period_start():
    result = _feed(
        EventProcessor(AARON, period_end=PERIOD_END, working_since=datetime(2024, 3, 1, 6, 0)),
        [(datetime(2024, 3, 1, 7, 30), _change(AARON, WorkStatus.AWAY))],
    )
    assert result.duration.minutes() == (90, 0, 0)
    assert result.anomalies == ()


def test_still_working_at_period_end():
    processor = EventProcessor(AARON, period_end=PERIOD_END)
    processor.process(
        LoggedEvent(event_id=1, created_at=datetime(2024, 3, 31, 23, 0), event=_change(AARON, WorkStatus.WORKING))
    )
    assert processor.status is WorkStatus.WORKING

    result = processor.finish()
    assert result.duration.minutes() == (0, 60, 360)
    assert [a.kind for a in result.anomalies] == [AnomalyKind.STILL_WORKING_AT_BOUNDARY]
    assert result.anomalies[0].timestamp == PERIOD_END


def test_same_timestamp_is_ordered_by_event_id():
    at = datetime(2024, 3, 5, 8, 0)
    processor = EventProcessor(AARON, period_end=PERIOD_END)
    processor.process(LoggedEvent(event_id=1, created_at=at, event=_change(AARON, WorkStatus.WORKING)))
    processor.process(LoggedEvent(event_id=2, created_at=at, event=_change(BEERON, WorkStatus.WORKING)))

    with pytest.raises(EvaluationError):
        processor.process(LoggedEvent(event_id=1, created_at=at, event=Info("again")))


def test_events_out_of_order_are_fatal():
    processor = EventProcessor(AARON, period_end=PERIOD_END)
    processor.process(
        LoggedEvent(event_id=2, created_at=datetime(2024, 3, 5, 9, 0), event=_change(AARON, WorkStatus.WORKING))
    )
    with pytest.raises(EvaluationError):
        processor.process(
            LoggedEvent(event_id=3, created_at=datetime(2024, 3, 5, 8, 0), event=_change(AARON, WorkStatus.AWAY))
        )


def test_zero_length_shift_is_fatal():
    at = datetime(2024, 3, 5, 8, 0)
    processor = EventProcessor(AARON, period_end=PERIOD_END)
    processor.process(LoggedEvent(event_id=1, created_at=at, event=_change(AARON, WorkStatus.WORKING)))
    with pytest.raises(EvaluationError):
        processor.process(LoggedEvent(event_id=2, created_at=at, event=_change(AARON, WorkStatus.AWAY)))


def test_finished_processor_cannot_be_reused():
    processor = EventProcessor(AARON, period_end=PERIOD_END)
    processor.finish()

    with pytest.raises(EvaluationError):
        processor.finish()
    with pytest.raises(EvaluationError):
        processor.process(LoggedEvent(event_id=1, created_at=datetime(2024, 3, 5), event=Info("late")))
