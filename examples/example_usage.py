"""Example: use the service layer directly (without Flask).

Prints last month's bucketed minutes and the anomalies found in the event log.
"""

import importlib

from config import get_settings_module

from src.timeclock.timeclock.common.datetime_utils import now_local
from src.timeclock.timeclock.main import build_container_from_settings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)

    today = now_local().date()
    last_month = today.replace(day=1).replace(month=today.month - 1) if today.month > 1 else today.replace(
        year=today.year - 1, month=12, day=1
    )
    report = container.evaluation_service.evaluate_month(last_month)
    for row in report.to_table():
        print(row)


if __name__ == "__main__":
    main()
