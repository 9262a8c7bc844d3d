from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import Task
from .repository import TaskRepository

_COLUMNS = "id, task_name, description, completed, `date`, completed_at, is_default, created_by, sort_order"


def _to_task(r: dict) -> Task:
    return Task(
        id=int(r["id"]),
        task_name=r["task_name"],
        description=r.get("description"),
        completed=as_bool(r.get("completed")),
        date=str(r["date"]),
        completed_at=r.get("completed_at"),
        is_default=as_bool(r.get("is_default")),
        created_by=r.get("created_by"),
        sort_order=int(r.get("sort_order") or 0),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def seed_from_defaults(self, *, date: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT task_name, description FROM default_tasks ORDER BY sort_order, id")
            templates = fetchall(cur)
            if not templates:
                return 0

            # task_seeds.date is the primary key: only one caller gets rowcount 1.
            cur.execute("INSERT IGNORE INTO task_seeds(`date`) VALUES(%s)", (date,))
            if cur.rowcount != 1:
                return 0

            # Rows seeded before task_seeds existed still count as seeded.
            cur.execute("SELECT 1 AS found FROM tasks WHERE `date`=%s AND is_default=1 LIMIT 1", (date,))
            if fetchone(cur):
                return 0

            cur.executemany(
                """
                INSERT INTO tasks(task_name, description, `date`, is_default, sort_order)
                VALUES(%s,%s,%s,1,%s)
                """,
                [(t["task_name"], t.get("description"), date, position) for position, t in enumerate(templates)],
            )
            return len(templates)

    def list_for_date(self, *, date: str) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM tasks
                WHERE `date`=%s
                ORDER BY completed ASC, sort_order ASC, id ASC
                """,
                (date,),
            )
            return [_to_task(r) for r in fetchall(cur)]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id=%s", (int(task_id),))
            r = fetchone(cur)
            return _to_task(r) if r else None

    def append(self, *, task_name: str, description: Optional[str], date: str, created_by: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # Single statement so two concurrent appends cannot read the same MAX.
            cur.execute(
                """
                INSERT INTO tasks(task_name, description, `date`, created_by, is_default, sort_order)
                SELECT %s, %s, %s, %s, 0, COALESCE(MAX(t.sort_order), 0) + 1
                FROM tasks t
                WHERE t.`date`=%s
                """,
                (task_name, description, date, created_by, date),
            )
            return int(cur.lastrowid)

    def update_details(self, *, task_id: int, task_name: str, description: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE tasks SET task_name=%s, description=%s WHERE id=%s",
                (task_name, description, int(task_id)),
            )
            return cur.rowcount > 0

    def set_completed(self, *, task_id: int, completed: bool, completed_at: Optional[datetime]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE tasks SET completed=%s, completed_at=%s WHERE id=%s",
                (1 if completed else 0, completed_at, int(task_id)),
            )
            return cur.rowcount > 0

    def reorder(self, *, ordered_ids: Sequence[int]) -> int:
        if not ordered_ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            updated = 0
            for position, task_id in enumerate(ordered_ids):
                cur.execute(
                    "UPDATE tasks SET sort_order=%s WHERE id=%s AND completed=0",
                    (position, int(task_id)),
                )
                updated += cur.rowcount
            return updated

    def delete(self, *, task_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE id=%s", (int(task_id),))
            return cur.rowcount > 0

    def count_for_date(self, *, date: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS cnt FROM tasks WHERE `date`=%s", (date,))
            r = fetchone(cur)
            return int(r["cnt"]) if r else 0
