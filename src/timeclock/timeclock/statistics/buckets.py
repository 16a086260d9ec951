from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import parse_time
from ..core.constants import DEFAULT_REPORT_BUCKETS
from ..core.exceptions import EvaluationError, ValidationError

DAY = timedelta(days=1)
MINUTE = timedelta(minutes=1)


def _offset(t: time) -> timedelta:
    return timedelta(hours=t.hour, minutes=t.minute, seconds=t.second, microseconds=t.microsecond)


@dataclass(frozen=True)
class Bucket:
    """A pay-rate bucket: starts at ``start`` and runs until the next bucket starts."""

    label: str
    start: time
    weight: float = 1.0


class BucketSchedule:
    """Ordered, day-periodic partition of the 24 hours into pay-rate buckets.

    Bucket ``i`` covers ``[start_i, start_{i+1})``; the last bucket wraps
    around to the first one. The order given is the report column order and
    does not need to start at midnight.
    """

    def __init__(self, buckets: Sequence[Bucket]):
        if not buckets:
            raise ValidationError("At least one report bucket is required")
        starts = [_offset(b.start) for b in buckets]
        if len(set(starts)) != len(starts):
            raise ValidationError("Report buckets must have distinct start times")
        if any(b.weight < 0 for b in buckets):
            raise ValidationError("Report bucket weights must not be negative")

        self._buckets = tuple(buckets)
        self._starts = tuple(starts)
        self._lengths = tuple(
            self._until_next(i, starts[i]) for i in range(len(starts))
        )
        if sum(self._lengths, timedelta()) != DAY:
            raise ValidationError("Report bucket start times must be listed in cyclic order")

    @classmethod
    def from_config(cls, rows: Iterable[Sequence]) -> "BucketSchedule":
        """Build from ``(label, "HH:MM", weight)`` rows as found in settings."""
        buckets = []
        for row in rows:
            label, start = row[0], row[1]
            try:
                start_t = start if isinstance(start, time) else parse_time(str(start))
            except ValueError:
                raise ValidationError(f"Invalid bucket start time: {start!r}")
            try:
                weight = float(row[2]) if len(row) > 2 else 1.0
            except (TypeError, ValueError):
                raise ValidationError(f"Invalid weight for bucket {label!r}: {row[2]!r}")
            buckets.append(Bucket(label=str(label), start=start_t, weight=weight))
        return cls(buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def buckets(self) -> tuple[Bucket, ...]:
        return self._buckets

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(b.label for b in self._buckets)

    @property
    def weights(self) -> tuple[float, ...]:
        return tuple(b.weight for b in self._buckets)

    def _until_next(self, index: int, offset: timedelta) -> timedelta:
        """Time from ``offset`` (time of day) to the start of the bucket after ``index``."""
        next_start = self._starts[(index + 1) % len(self._starts)]
        remaining = (next_start - offset) % DAY
        return remaining or DAY

    def index_at(self, offset: timedelta) -> int:
        """Bucket containing the given time-of-day offset."""
        for i, start in enumerate(self._starts):
            if (offset - start) % DAY < self._lengths[i]:
                return i
        raise AssertionError(f"offset {offset} not covered by bucket schedule")

    def allocate(self, start: datetime, end: datetime) -> "BucketedDuration":
        """Split ``[start, end)`` into per-bucket durations.

        Walks forward from the time of day of ``start``: consume as much as fits
        into the current bucket, then continue with the next bucket (cyclically).
        Works for spans of any length since the schedule repeats every day.
        """

        if not start < end:
            raise EvaluationError(f"Cannot allocate work time: start {start} is not before end {end}")

        totals = [timedelta()] * len(self._buckets)
        remaining = end - start
        offset = start - datetime.combine(start.date(), time.min)
        index = self.index_at(offset)

        while remaining > timedelta():
            step = min(remaining, self._until_next(index, offset))
            totals[index] += step
            remaining -= step
            offset = (offset + step) % DAY
            index = (index + 1) % len(self._buckets)

        return BucketedDuration(tuple(totals))

    def zero(self) -> "BucketedDuration":
        return BucketedDuration.zero(len(self._buckets))


@dataclass(frozen=True)
class BucketedDuration:
    """Worked time split per bucket (same order as the schedule)."""

    parts: tuple[timedelta, ...]

    @classmethod
    def zero(cls, size: int) -> "BucketedDuration":
        return cls(tuple(timedelta() for _ in range(size)))

    def __add__(self, other: "BucketedDuration") -> "BucketedDuration":
        if len(self.parts) != len(other.parts):
            raise EvaluationError(
                f"Cannot add durations with {len(self.parts)} and {len(other.parts)} buckets"
            )
        return BucketedDuration(tuple(a + b for a, b in zip(self.parts, other.parts)))

    def total(self) -> timedelta:
        return sum(self.parts, timedelta())

    def minutes(self) -> tuple[int, ...]:
        return tuple(p // MINUTE for p in self.parts)

    def weighted_minutes(self, weights: Sequence[float]) -> int:
        return int(sum(w * m for w, m in zip(weights, self.minutes())))


DEFAULT_SCHEDULE = BucketSchedule.from_config(DEFAULT_REPORT_BUCKETS)


def allocate(start: datetime, end: datetime, schedule: BucketSchedule = DEFAULT_SCHEDULE) -> BucketedDuration:
    return schedule.allocate(start, end)
