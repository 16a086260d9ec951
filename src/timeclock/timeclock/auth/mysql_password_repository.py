from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import PasswordRepository


class MySQLPasswordRepository(PasswordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_hashes(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT phc FROM passwords ORDER BY password_id ASC")
            return [r["phc"] for r in fetchall(cur)]

    def add_hash(self, phc: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO passwords(phc) VALUES(%s)", (phc,))
            return int(cur.lastrowid)
