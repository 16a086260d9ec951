from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Iterable, Optional, Sequence

from .auth.mysql_password_repository import MySQLPasswordRepository
from .auth.service import AuthService
from .common.datetime_utils import parse_time
from .core.constants import CUTOVER_TIME, DAY_BOUNDARY_TIME, DEFAULT_REPORT_BUCKETS
from .database.connection import DatabaseConnection, DBConfig
from .events.mysql_event_repository import MySQLEventLog
from .events.service import EventLogService
from .staff.mysql_staff_repository import MySQLStaffDirectory
from .staff.service import StaffService
from .statistics.buckets import BucketSchedule
from .statistics.service import EvaluationService
from .timetrack.service import TimetrackService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    events_repo: MySQLEventLog
    staff_repo: MySQLStaffDirectory
    passwords_repo: MySQLPasswordRepository

    journal_service: EventLogService
    staff_service: StaffService
    timetrack_service: TimetrackService
    evaluation_service: EvaluationService
    auth_service: AuthService


def _as_time(value, default: time) -> time:
    if value is None:
        return default
    if isinstance(value, time):
        return value
    return parse_time(str(value))


def build_container(
    *,
    db_config: dict,
    report_buckets: Optional[Iterable[Sequence]] = None,
    cutover: Optional[str | time] = None,
    day_boundary_time: Optional[str | time] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    cutover_t = _as_time(cutover, CUTOVER_TIME)
    boundary_t = _as_time(day_boundary_time, DAY_BOUNDARY_TIME)
    schedule = BucketSchedule.from_config(report_buckets or DEFAULT_REPORT_BUCKETS)

    events_repo = MySQLEventLog(conn)
    staff_repo = MySQLStaffDirectory(conn)
    passwords_repo = MySQLPasswordRepository(conn)

    journal_service = EventLogService(events_repo, cutover=cutover_t, day_boundary_time=boundary_t)
    staff_service = StaffService(staff_repo)
    timetrack_service = TimetrackService(events_repo, staff_repo, staff_service)
    evaluation_service = EvaluationService(
        events_repo,
        staff_repo,
        journal=journal_service,
        schedule=schedule,
        cutover=cutover_t,
    )
    auth_service = AuthService(passwords_repo)

    return Container(
        conn=conn,
        events_repo=events_repo,
        staff_repo=staff_repo,
        passwords_repo=passwords_repo,
        journal_service=journal_service,
        staff_service=staff_service,
        timetrack_service=timetrack_service,
        evaluation_service=evaluation_service,
        auth_service=auth_service,
    )
