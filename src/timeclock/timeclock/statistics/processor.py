from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import AnomalyKind, WorkStatus
from ..core.exceptions import EvaluationError
from ..events.model import DayBoundary, EventOver, LoggedEvent, StatusChange
from ..staff.model import StaffMember
from .buckets import DEFAULT_SCHEDULE, BucketedDuration, BucketSchedule

_TS_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Anomaly:
    """Soft error: inconsistent history that is reported but does not stop the evaluation."""

    kind: AnomalyKind
    timestamp: datetime
    member_name: str

    @property
    def message(self) -> str:
        ts = self.timestamp.strftime(_TS_FORMAT)
        if self.kind == AnomalyKind.ALREADY_WORKING:
            return (
                f"At {ts} the status of {self.member_name} was set to 'Working' while they were "
                "already working. Inconsistent data, please check by hand."
            )
        if self.kind == AnomalyKind.ALREADY_AWAY:
            return (
                f"At {ts} the status of {self.member_name} was set to 'Away' while they were "
                "already away. Inconsistent data or work across a period boundary, please check by hand."
            )
        if self.kind == AnomalyKind.OVER_WHILE_WORKING:
            return (
                f"At {ts} the event was closed while {self.member_name} was still working. "
                "Inconsistent data, please check by hand."
            )
        return (
            f"{self.member_name} was still working at the boundary at {ts}. "
            "They probably forgot to sign off."
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ProcessorResult:
    duration: BucketedDuration
    anomalies: tuple[Anomaly, ...] = field(default_factory=tuple)


class EventProcessor:
    """Per-member state machine that turns a slice of the event log into worked time.

    States are Away and Working(since). Events must be fed in increasing
    ``(created_at, event_id)`` order; the processor does not sort.

    | state      | event                   | action                                     |
    |------------|-------------------------|--------------------------------------------|
    | Away       | StatusChange -> Working | Working(event time)                        |
    | Away       | StatusChange -> Away    | anomaly ALREADY_AWAY                       |
    | Working(t) | StatusChange -> Away    | credit [t, event time), Away               |
    | Working(t) | StatusChange -> Working | anomaly ALREADY_WORKING                    |
    | Working(t) | DayBoundary             | anomaly, credit [t, event time), Away      |
    | Working(t) | EventOver               | anomaly OVER_WHILE_WORKING, stay Working   |

    Everything else (other members, Info, Error, legacy EventStart) is ignored.
    """

    def __init__(
        self,
        member: StaffMember,
        *,
        period_end: datetime,
        working_since: Optional[datetime] = None,
        schedule: BucketSchedule = DEFAULT_SCHEDULE,
    ):
        self._member = member
        self._period_end = period_end
        self._schedule = schedule
        self._working_since = working_since
        self._duration = schedule.zero()
        self._anomalies: list[Anomaly] = []
        self._last_key: Optional[tuple[datetime, int]] = None
        self._finished = False

    @property
    def status(self) -> WorkStatus:
        return WorkStatus.AWAY if self._working_since is None else WorkStatus.WORKING

    def _ensure_open(self) -> None:
        if self._finished:
            raise EvaluationError(f"Processor for {self._member.name} was already finished")

    def _anomaly(self, kind: AnomalyKind, at: datetime) -> None:
        self._anomalies.append(Anomaly(kind=kind, timestamp=at, member_name=self._member.name))

    def _credit(self, start: datetime, end: datetime) -> None:
        self._duration = self._duration + self._schedule.allocate(start, end)

    def process(self, logged: LoggedEvent) -> None:
        self._ensure_open()

        key = logged.sort_key
        if self._last_key is not None and key <= self._last_key:
            raise EvaluationError(
                f"Events out of order: event {logged.event_id} at {logged.created_at} "
                f"after event {self._last_key[1]} at {self._last_key[0]}"
            )
        self._last_key = key

        event = logged.event
        at = logged.created_at

        if isinstance(event, StatusChange):
            if event.member_id != self._member.member_id:
                return
            if self._working_since is None:
                if event.new_status is WorkStatus.WORKING:
                    self._working_since = at
                else:
                    self._anomaly(AnomalyKind.ALREADY_AWAY, at)
            else:
                if event.new_status is WorkStatus.AWAY:
                    self._credit(self._working_since, at)
                    self._working_since = None
                else:
                    self._anomaly(AnomalyKind.ALREADY_WORKING, at)
            return

        if self._working_since is None:
            return

        if isinstance(event, DayBoundary):
            self._anomaly(AnomalyKind.STILL_WORKING_AT_BOUNDARY, at)
            self._credit(self._working_since, at)
            self._working_since = None
        elif isinstance(event, EventOver):
            self._anomaly(AnomalyKind.OVER_WHILE_WORKING, at)

    def finish(self) -> ProcessorResult:
        """Close the period. The processor cannot be used afterwards."""
        self._ensure_open()
        self._finished = True

        if self._working_since is not None:
            self._anomaly(AnomalyKind.STILL_WORKING_AT_BOUNDARY, self._period_end)
            self._credit(self._working_since, self._period_end)
            self._working_since = None

        return ProcessorResult(duration=self._duration, anomalies=tuple(self._anomalies))
