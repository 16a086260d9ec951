from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..core.constants import CUTOVER_TIME


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def parse_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS string into time."""
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def first_of_next_month(d: date) -> date:
    if d.month == 12:
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def month_period(month: date, *, cutover: time = CUTOVER_TIME) -> tuple[datetime, datetime]:
    """Reporting period of a month: first day at cutover -> first of next month at cutover."""
    start = datetime.combine(first_of_month(month), cutover)
    end = datetime.combine(first_of_next_month(month), cutover)
    return start, end


def last_cutover(now: datetime, *, cutover: time = CUTOVER_TIME) -> datetime:
    """Most recent cutover at or before ``now``."""
    today_cutover = datetime.combine(now.date(), cutover)
    if now >= today_cutover:
        return today_cutover
    return today_cutover - timedelta(days=1)
