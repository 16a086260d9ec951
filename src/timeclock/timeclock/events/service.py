from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import last_cutover
from ..common.logger import get_logger
from ..core.constants import CUTOVER_TIME, DAY_BOUNDARY_TIME
from ..core.exceptions import ValidationError
from .model import DayBoundary, Error, Info, LoggedEvent
from .repository import EventLog


class EventLogService:
    """Use case: operator journal and maintenance of the event log."""

    def __init__(
        self,
        events: EventLog,
        *,
        cutover: time = CUTOVER_TIME,
        day_boundary_time: time = DAY_BOUNDARY_TIME,
    ):
        self._events = events
        self._cutover = cutover
        self._day_boundary_time = day_boundary_time
        self._logger = get_logger("timeclock.events")

    def log_info(self, text: str, *, at: Optional[datetime] = None) -> LoggedEvent:
        self._logger.info(text)
        return self._events.append(Info(text), created_at=at)

    def log_error(self, text: str, *, at: Optional[datetime] = None) -> LoggedEvent:
        self._logger.error(text)
        return self._events.append(Error(text), created_at=at)

    def journal(self, now: datetime) -> list[LoggedEvent]:
        """Events of the current working day (since the last cutover) up to ``now``."""
        return list(self._events.load_between(last_cutover(now, cutover=self._cutover), now))

    def seed_day_boundaries(self, first_day: date, days: int) -> int:
        """Pre-materialize one DayBoundary per day, starting with ``first_day``."""
        if days <= 0:
            raise ValidationError("Number of days must be positive")

        existing = {
            e.created_at
            for e in self._events.load_between(
                datetime.combine(first_day, time.min),
                datetime.combine(first_day + timedelta(days=days), time.min),
            )
            if isinstance(e.event, DayBoundary)
        }

        created = 0
        for offset in range(days):
            at = datetime.combine(first_day + timedelta(days=offset), self._day_boundary_time)
            if at in existing:
                continue
            self._events.append(DayBoundary(), created_at=at)
            created += 1

        self._logger.info(f"Seeded {created} day boundaries from {first_day:%Y-%m-%d} ({days} days)")
        return created
