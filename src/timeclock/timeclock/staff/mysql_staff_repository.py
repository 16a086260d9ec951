from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StaffMember
from .repository import StaffDirectory


def _to_member(row: dict) -> StaffMember:
    return StaffMember(
        member_id=int(row["staff_id"]),
        name=row["name"],
        pin=row.get("pin"),
        card_id=row.get("card_id"),
        is_visible=bool(row.get("is_visible", True)),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLStaffDirectory(StaffDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_active_members(self) -> Sequence[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, name, pin, card_id, is_visible, is_active
                FROM staff
                WHERE is_active=1
                ORDER BY staff_id ASC
                """
            )
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: int) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, name, pin, card_id, is_visible, is_active
                FROM staff
                WHERE staff_id=%s
                """,
                (int(member_id),),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None

    def create(self, *, name: str, pin: str, card_id: str) -> StaffMember:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff(name, pin, card_id, is_visible, is_active)
                VALUES(%s,%s,%s,1,1)
                """,
                (name, pin, card_id),
            )
            return StaffMember(member_id=int(cur.lastrowid), name=name, pin=pin, card_id=card_id)

    def save(self, member: StaffMember) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff
                SET name=%s, pin=%s, card_id=%s, is_visible=%s
                WHERE staff_id=%s AND is_active=1
                """,
                (member.name, member.pin, member.card_id, int(member.is_visible), member.member_id),
            )
            return cur.rowcount > 0

    def deactivate(self, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff
                SET is_active=0, pin=NULL, card_id=NULL
                WHERE staff_id=%s AND is_active=1
                """,
                (int(member_id),),
            )
            return cur.rowcount > 0
