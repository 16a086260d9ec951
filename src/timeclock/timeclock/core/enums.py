from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Work status of a staff member, always derived from the event log."""

    AWAY = "away"
    WORKING = "working"

    def toggle(self) -> "WorkStatus":
        return WorkStatus.WORKING if self is WorkStatus.AWAY else WorkStatus.AWAY

    @property
    def label(self) -> str:
        return "Working" if self is WorkStatus.WORKING else "Away"


class EventKind(str, Enum):
    """Discriminator stored alongside every serialized event."""

    STATUS_CHANGE = "status_change"
    DAY_BOUNDARY = "day_boundary"
    EVENT_START = "event_start"
    EVENT_OVER = "event_over"
    INFO = "info"
    ERROR = "error"


class AnomalyKind(str, Enum):
    """Soft data-quality problems found while evaluating a period."""

    ALREADY_WORKING = "ALREADY_WORKING"
    ALREADY_AWAY = "ALREADY_AWAY"
    STILL_WORKING_AT_BOUNDARY = "STILL_WORKING_AT_BOUNDARY"
    OVER_WHILE_WORKING = "OVER_WHILE_WORKING"
