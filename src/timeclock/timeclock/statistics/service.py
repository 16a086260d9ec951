from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Sequence

from ..common.datetime_utils import month_period
from ..common.logger import get_logger
from ..core.constants import CUTOVER_TIME
from ..core.enums import WorkStatus
from ..core.exceptions import ValidationError
from ..events.repository import EventLog
from ..events.service import EventLogService
from ..staff.model import StaffMember
from ..staff.repository import StaffDirectory
from ..timetrack.status import compute_status
from .buckets import DEFAULT_SCHEDULE, BucketSchedule
from .processor import Anomaly, EventProcessor
from .report import Report, ReportRow

_TS_FORMAT = "%Y-%m-%d %H:%M"


class EvaluationService:
    """Use case: bucketed worked minutes per staff member for a period."""

    def __init__(
        self,
        events: EventLog,
        staff: StaffDirectory,
        *,
        journal: Optional[EventLogService] = None,
        schedule: BucketSchedule = DEFAULT_SCHEDULE,
        cutover: time = CUTOVER_TIME,
    ):
        self._events = events
        self._journal = journal or EventLogService(events, cutover=cutover)
        self._staff = staff
        self._schedule = schedule
        self._cutover = cutover
        self._logger = get_logger("timeclock.statistics")

    @property
    def schedule(self) -> BucketSchedule:
        return self._schedule

    def evaluate_month(self, month: date, *, visible_only: bool = False) -> Report:
        start, end = month_period(month, cutover=self._cutover)
        return self.evaluate(start, end, self._staff.load_active_members(), visible_only=visible_only)

    def evaluate(
        self,
        period_start: datetime,
        period_end: datetime,
        staff: Sequence[StaffMember],
        *,
        visible_only: bool = False,
    ) -> Report:
        if not period_start < period_end:
            raise ValidationError("Evaluation period must end after it starts")

        self._journal.log_info(
            f"Starting evaluation between {period_start:{_TS_FORMAT}} and {period_end:{_TS_FORMAT}}"
        )

        # Everything before the period decides who was already working when it began.
        previous = self._events.load_between(None, period_start)
        events = self._events.load_between(period_start, period_end)

        members = [m for m in staff if m.is_visible] if visible_only else list(staff)

        rows: list[ReportRow] = []
        anomalies: list[Anomaly] = []
        for member in members:
            working_since: Optional[datetime] = None
            if compute_status(member.member_id, previous) is WorkStatus.WORKING:
                working_since = period_start

            processor = EventProcessor(
                member,
                period_end=period_end,
                working_since=working_since,
                schedule=self._schedule,
            )
            for logged in events:
                processor.process(logged)
            result = processor.finish()

            rows.append(
                ReportRow(
                    member_id=member.member_id,
                    name=member.name,
                    minutes=result.duration.minutes(),
                    weighted_minutes=result.duration.weighted_minutes(self._schedule.weights),
                )
            )
            anomalies.extend(result.anomalies)

        for anomaly in anomalies:
            self._journal.log_error(anomaly.message)

        self._logger.info(f"Evaluation finished: {len(rows)} row(s), {len(anomalies)} anomalies")

        return Report(
            period_start=period_start,
            period_end=period_end,
            bucket_labels=self._schedule.labels,
            rows=tuple(rows),
            anomalies=tuple(anomalies),
        )

