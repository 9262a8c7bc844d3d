from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Sequence

from ..core.constants import DEFAULT_TASK_TEMPLATES
from .connection import DatabaseConnection, DBConfig
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)


def clean_schema_sql(sql: str) -> str:
    """Drop CREATE DATABASE/USE statements and full-line comments.

    The target database comes from DB_CONFIG, not from the file.
    """
    sql = re.sub(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$", "", sql)
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Yield the ';'-terminated statements of a schema file.

    Semicolons inside quoted literals (with backslash escapes) do not split.
    """
    start = 0
    quote: str | None = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    sql = clean_schema_sql(Path(schema_path).read_text(encoding="utf-8"))

    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config)), dictionary=False) as (_, cur):
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
    logger.info("Schema applied from %s", schema_path)


def ensure_default_task_templates(
    db_config: dict,
    *,
    templates: Sequence[tuple[str, str]] = DEFAULT_TASK_TEMPLATES,
) -> int:
    """Install the standard templates when default_tasks is empty.

    Returns the number of templates inserted.
    """
    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config))) as (_, cur):
        cur.execute("SELECT COUNT(*) AS cnt FROM default_tasks")
        row = cur.fetchone()
        if row and int(row["cnt"]) > 0:
            logger.info("Default task templates already present (%s)", row["cnt"])
            return 0

        for position, (task_name, description) in enumerate(templates, start=1):
            cur.execute(
                "INSERT INTO default_tasks(task_name, description, sort_order) VALUES(%s,%s,%s)",
                (task_name, description, position),
            )
    logger.info("Inserted %d default task templates", len(templates))
    return len(templates)


def list_tables(db_config: dict) -> list[str]:
    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config)), dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
