from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Client
from .repository import ClientRepository


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, client_name, created_at FROM clients ORDER BY client_name, id")
            return [
                Client(id=int(r["id"]), client_name=r["client_name"], created_at=r.get("created_at"))
                for r in fetchall(cur)
            ]

    def get_by_id(self, client_id: int) -> Optional[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, client_name, created_at FROM clients WHERE id=%s", (int(client_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Client(id=int(r["id"]), client_name=r["client_name"], created_at=r.get("created_at"))

    def create(self, *, client_name: str, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO clients(client_name, created_at) VALUES(%s,%s)",
                (client_name, created_at),
            )
            return int(cur.lastrowid)

    def delete_with_projects(self, *, client_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE client_id=%s", (int(client_id),))
            removed = cur.rowcount
            cur.execute("DELETE FROM clients WHERE id=%s", (int(client_id),))
            return int(removed)
