from __future__ import annotations

import importlib.util
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from src.timeclock.timeclock.events.model import DayBoundary
from src.timeclock.timeclock.events.service import EventLogService

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "init_db.py"


@pytest.fixture
def init_db(monkeypatch, event_log):
    monkeypatch.setenv("APP_ENV", "testing")

    spec = importlib.util.spec_from_file_location("init_db_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    applied = []
    monkeypatch.setattr(module, "apply_schema", lambda db_config, schema_path: applied.append(schema_path))
    monkeypatch.setattr(module, "list_tables", lambda db_config: ["staff", "passwords", "events"])
    monkeypatch.setattr(module, "now_local", lambda: datetime(2024, 3, 1, 12, 0))
    monkeypatch.setattr(
        module,
        "build_container_from_settings",
        lambda settings: SimpleNamespace(journal_service=EventLogService(event_log)),
    )
    module.applied = applied
    return module


def test_applies_schema_and_seeds_boundaries(init_db, event_log, capsys):
    init_db.main(["3"])

    assert init_db.applied == [SCRIPT_PATH.parents[1] / "database" / "schema.sql"]
    assert [e.created_at for e in event_log.events] == [
        datetime(2024, 3, 1, 5, 59, 59),
        datetime(2024, 3, 2, 5, 59, 59),
        datetime(2024, 3, 3, 5, 59, 59),
    ]
    assert all(isinstance(e.event, DayBoundary) for e in event_log.events)

    out = capsys.readouterr().out
    assert "events, passwords, staff" in out
    assert "Seeded 3 day boundaries from 2024-03-01" in out


def test_zero_days_only_applies_schema(init_db, event_log):
    init_db.main(["0"])

    assert len(init_db.applied) == 1
    assert event_log.events == []
