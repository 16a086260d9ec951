"""Create the timeclock database and pre-seed the daily boundary markers.

Usage: python scripts/init_db.py [days]

`days` defaults to one year starting today; pass 0 to only apply the schema.
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

from src.timeclock.timeclock.common.datetime_utils import now_local
from src.timeclock.timeclock.core.constants import DEFAULT_SEED_DAYS
from src.timeclock.timeclock.database.bootstrap import apply_schema, list_tables
from src.timeclock.timeclock.main import build_container_from_settings


def main(argv: list[str]) -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    print(f"OK: Tables in {db_config.get('database')}: {', '.join(sorted(list_tables(db_config)))}")

    days = int(argv[0]) if argv else DEFAULT_SEED_DAYS
    if days <= 0:
        return

    container = build_container_from_settings(settings)
    today = now_local().date()
    created = container.journal_service.seed_day_boundaries(today, days)
    print(f"OK: Seeded {created} day boundaries from {today:%Y-%m-%d}")


if __name__ == "__main__":
    main(sys.argv[1:])
