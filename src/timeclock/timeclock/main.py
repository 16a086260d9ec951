from __future__ import annotations

import importlib
from types import ModuleType

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logger import configure_logging, get_logger
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .auth.controller import register as register_auth
from .staff.controller import register as register_staff
from .statistics.controller import register as register_statistics
from .timetrack.controller import register as register_timetrack


def build_container_from_settings(settings: ModuleType) -> Container:
    return build_container(
        db_config=getattr(settings, "DB_CONFIG"),
        report_buckets=getattr(settings, "REPORT_BUCKETS", None),
        cutover=getattr(settings, "CUTOVER_TIME", None),
        day_boundary_time=getattr(settings, "DAY_BOUNDARY_TIME", None),
    )


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_FILE", None))
    logger = get_logger("timeclock.app")

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            f"settings={settings_module} "
            f"db={db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info(f"schema ready (tables={len(list_tables(db_config))})")

        container = build_container_from_settings(settings)

    register_auth(app, container)
    register_timetrack(app, container)
    register_staff(app, container)
    register_statistics(app, container)

    return app
