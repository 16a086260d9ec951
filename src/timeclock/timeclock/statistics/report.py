from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .processor import Anomaly


@dataclass(frozen=True)
class ReportRow:
    """Read-model for export: one row per staff member."""

    member_id: int
    name: str
    minutes: tuple[int, ...]
    weighted_minutes: int

    def to_dict(self, labels: tuple[str, ...]) -> dict:
        return {
            "member_id": self.member_id,
            "name": self.name,
            "minutes": dict(zip(labels, self.minutes)),
            "weighted_minutes": self.weighted_minutes,
        }


@dataclass(frozen=True)
class Report:
    period_start: datetime
    period_end: datetime
    bucket_labels: tuple[str, ...]
    rows: tuple[ReportRow, ...]
    anomalies: tuple[Anomaly, ...]

    def header(self) -> list[str]:
        return ["Name"] + [f"Minutes {label}" for label in self.bucket_labels] + ["Weighted minutes"]

    def to_table(self) -> list[list]:
        """Rows handed to the report sink.

        Member rows follow the staff order; each anomaly gets its own row with
        the message in the column after the data columns.
        """

        header = self.header()
        table: list[list] = [header]
        for r in self.rows:
            table.append([r.name, *r.minutes, r.weighted_minutes])
        for a in self.anomalies:
            table.append([""] * len(header) + [a.message])
        return table

    def to_dict(self) -> dict:
        return {
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "buckets": list(self.bucket_labels),
            "rows": [r.to_dict(self.bucket_labels) for r in self.rows],
            "anomalies": [a.message for a in self.anomalies],
        }
