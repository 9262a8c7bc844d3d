from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import Project, ProjectChanges
from .repository import ProjectRepository

_COLUMNS = "id, client_id, project_name, description, due_date, completed, completed_at, created_at"


def _to_project(r: dict) -> Project:
    return Project(
        id=int(r["id"]),
        client_id=int(r["client_id"]),
        project_name=r["project_name"],
        description=r.get("description"),
        due_date=str(r["due_date"]),
        completed=as_bool(r.get("completed")),
        completed_at=r.get("completed_at"),
        created_at=r.get("created_at"),
    )


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_projects(self, *, client_id: Optional[int] = None) -> Sequence[Project]:
        clauses = ["1=1"]
        params: list[object] = []
        if client_id is not None:
            clauses.append("client_id=%s")
            params.append(int(client_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM projects
                WHERE {where}
                ORDER BY completed ASC, due_date ASC, id ASC
                """,
                tuple(params),
            )
            return [_to_project(r) for r in fetchall(cur)]

    def list_due_or_overdue(self, *, today: str) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM projects
                WHERE completed=0 AND due_date<=%s
                ORDER BY due_date ASC, id ASC
                """,
                (today,),
            )
            return [_to_project(r) for r in fetchall(cur)]

    def get_by_id(self, project_id: int) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM projects WHERE id=%s", (int(project_id),))
            r = fetchone(cur)
            return _to_project(r) if r else None

    def create(
        self,
        *,
        client_id: int,
        project_name: str,
        description: Optional[str],
        due_date: str,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO projects(client_id, project_name, description, due_date, completed, created_at)
                VALUES(%s,%s,%s,%s,0,%s)
                """,
                (int(client_id), project_name, description, due_date, created_at),
            )
            return int(cur.lastrowid)

    def update(self, *, project_id: int, changes: ProjectChanges) -> bool:
        sets: list[str] = []
        params: list[object] = []
        if changes.project_name is not None:
            sets.append("project_name=%s")
            params.append(changes.project_name)
        if changes.description is not None:
            sets.append("description=%s")
            params.append(changes.description)
        if changes.due_date is not None:
            sets.append("due_date=%s")
            params.append(changes.due_date)
        if changes.completed is not None:
            sets.append("completed=%s")
            params.append(1 if changes.completed else 0)
            sets.append("completed_at=%s")
            params.append(changes.completed_at if changes.completed else None)

        if not sets:
            return False

        params.append(int(project_id))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE projects SET {', '.join(sets)} WHERE id=%s", tuple(params))
            return cur.rowcount > 0

    def delete(self, *, project_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE id=%s", (int(project_id),))
            return cur.rowcount > 0
