from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DefaultTask
from .repository import DefaultTaskRepository


class MySQLDefaultTaskRepository(DefaultTaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[DefaultTask]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, task_name, description, sort_order FROM default_tasks ORDER BY sort_order, id")
            return [
                DefaultTask(
                    id=int(r["id"]),
                    task_name=r["task_name"],
                    description=r.get("description"),
                    sort_order=int(r.get("sort_order") or 0),
                )
                for r in fetchall(cur)
            ]

    def append(self, *, task_name: str, description: Optional[str]) -> DefaultTask:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO default_tasks(task_name, description, sort_order)
                SELECT %s, %s, COALESCE(MAX(d.sort_order), 0) + 1
                FROM default_tasks d
                """,
                (task_name, description),
            )
            template_id = int(cur.lastrowid)

            cur.execute("SELECT sort_order FROM default_tasks WHERE id=%s", (template_id,))
            r = fetchone(cur)
            return DefaultTask(
                id=template_id,
                task_name=task_name,
                description=description,
                sort_order=int(r["sort_order"]) if r else 0,
            )

    def delete(self, *, template_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM default_tasks WHERE id=%s", (int(template_id),))
            return cur.rowcount > 0
