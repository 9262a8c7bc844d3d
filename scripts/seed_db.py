from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.employee_portal.employee_portal.database.bootstrap import ensure_default_task_templates
from src.employee_portal.employee_portal.main import configure_logging

logger = logging.getLogger("employee_portal.seed_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    inserted = ensure_default_task_templates(dict(settings.DB_CONFIG))
    logger.info("%d default task templates installed", inserted)


if __name__ == "__main__":
    main()
