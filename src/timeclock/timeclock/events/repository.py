from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import LoggedEvent, WorkEvent


class EventLog(Protocol):
    """Append-only event log.

    Note (DIP): services depend on this interface, not on a concrete storage engine.
    """

    def append(self, event: WorkEvent, *, created_at: Optional[datetime] = None) -> LoggedEvent:
        """Store one event; ``created_at`` defaults to the current local time."""

        raise NotImplementedError

    def load_between(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[LoggedEvent]:
        """Events with ``start <= created_at < end`` ordered by ``(created_at, event_id)``.

        ``None`` leaves that side unbounded.
        """

        raise NotImplementedError
