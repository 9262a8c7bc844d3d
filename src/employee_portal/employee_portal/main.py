from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, ensure_default_task_templates, list_tables
from .core.constants import DEFAULT_SESSION_DAYS

from .container import Container, build_container
from .common.http import register_error_handlers
from .auth.controller import register as register_auth
from .clients.controller import register as register_clients
from .payroll.controller import register as register_payroll
from .system.controller import register as register_system
from .tasks.controller import register as register_tasks
from .time_entries.controller import register as register_time_entries

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 5001))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_default_task_templates(db_config)

        container = build_container(
            db_config=db_config,
            authorized_employees=getattr(settings, "AUTHORIZED_EMPLOYEES"),
            manual_entry_policy=getattr(settings, "MANUAL_ENTRY_POLICY", "permissive"),
        )

    register_error_handlers(app)
    register_system(app, container)
    register_auth(app, container)
    register_time_entries(app, container)
    register_tasks(app, container)
    register_payroll(app, container)
    register_clients(app, container)

    return app
