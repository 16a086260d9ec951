"""Pre-materialize the daily DayBoundary markers.

Usage: python scripts/seed_day_boundaries.py [YYYY-MM-DD] [days]

Already existing markers are skipped, so the script can be re-run safely.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.timeclock.timeclock.common.datetime_utils import now_local, parse_iso_date
from src.timeclock.timeclock.core.constants import DEFAULT_SEED_DAYS
from src.timeclock.timeclock.main import build_container_from_settings


def main(argv: list[str]) -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)

    first_day = parse_iso_date(argv[0]) if argv else now_local().date()
    days = int(argv[1]) if len(argv) > 1 else DEFAULT_SEED_DAYS

    created = container.journal_service.seed_day_boundaries(first_day, days)
    print(f"OK: Seeded {created} day boundaries starting {first_day:%Y-%m-%d}")


if __name__ == "__main__":
    main(sys.argv[1:])
