from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .codec import decode_event, encode_event
from .model import LoggedEvent, WorkEvent
from .repository import EventLog


class MySQLEventLog(EventLog):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, event: WorkEvent, *, created_at: Optional[datetime] = None) -> LoggedEvent:
        created_at = created_at or now_local()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO events(created_at, event_json)
                VALUES(%s,%s)
                """,
                (created_at, encode_event(event)),
            )
            return LoggedEvent(event_id=int(cur.lastrowid), created_at=created_at, event=event)

    def load_between(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[LoggedEvent]:
        clauses: list[str] = []
        params: list[object] = []

        if start is not None:
            clauses.append("created_at >= %s")
            params.append(start)
        if end is not None:
            clauses.append("created_at < %s")
            params.append(end)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT event_id, created_at, event_json
                FROM events
                {where}
                ORDER BY created_at ASC, event_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                LoggedEvent(
                    event_id=int(r["event_id"]),
                    created_at=r["created_at"],
                    event=decode_event(r["event_json"]),
                )
                for r in rows
            ]
