from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.timeclock.timeclock.core.exceptions import ValidationError
from src.timeclock.timeclock.main import build_container_from_settings


def main(argv: list[str]) -> None:
    if not argv:
        raise SystemExit("Usage: add_admin_password.py <password>")

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)

    try:
        container.auth_service.add_password(argv[0].strip())
    except ValidationError as e:
        raise SystemExit(str(e))
    print("OK: Admin password stored")


if __name__ == "__main__":
    main(sys.argv[1:])
