from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from ..core.enums import EventKind, WorkStatus


@dataclass(frozen=True)
class StatusChange:
    """A staff member switched to Working or Away.

    ``member_name`` is a snapshot taken when the event was written, so the
    journal stays readable after a rename or deactivation.
    """

    member_id: int
    member_name: str
    new_status: WorkStatus

    kind = EventKind.STATUS_CHANGE

    def describe(self) -> str:
        return f'Status of {self.member_name} set to "{self.new_status.label}"'


@dataclass(frozen=True)
class DayBoundary:
    """Daily reset marker: everyone not marked Working since the last one is Away."""

    kind = EventKind.DAY_BOUNDARY

    def describe(self) -> str:
        return "Day boundary"


@dataclass(frozen=True)
class EventStart:
    """Legacy marker; only decoded so that old rows stay readable."""

    kind = EventKind.EVENT_START

    def describe(self) -> str:
        return "Event started"


@dataclass(frozen=True)
class EventOver:
    """Legacy manual close-out of a shift."""

    kind = EventKind.EVENT_OVER

    def describe(self) -> str:
        return "Event over"


@dataclass(frozen=True)
class Info:
    text: str

    kind = EventKind.INFO

    def describe(self) -> str:
        return f"Info: {self.text}"


@dataclass(frozen=True)
class Error:
    text: str

    kind = EventKind.ERROR

    def describe(self) -> str:
        return f"Error: {self.text}"


WorkEvent = Union[StatusChange, DayBoundary, EventStart, EventOver, Info, Error]


@dataclass(frozen=True)
class LoggedEvent:
    """An event as stored in the log: payload + creation time + log-assigned id.

    Events are totally ordered by ``(created_at, event_id)``; the id breaks ties
    between events written within the same timestamp.
    """

    event_id: int
    created_at: datetime
    event: WorkEvent

    @property
    def sort_key(self) -> tuple[datetime, int]:
        return (self.created_at, self.event_id)

    def describe(self) -> str:
        return f"{self.created_at:%Y-%m-%d %H:%M:%S} {self.event.describe()}"
