from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import PayrollEntryRow, TimeEntry
from .repository import TimeEntryRepository

_COLUMNS = "id, employee_name, clock_in, clock_out, duration_minutes, `date`"


def _to_entry(r: dict) -> TimeEntry:
    duration = r.get("duration_minutes")
    return TimeEntry(
        id=int(r["id"]),
        employee_name=r["employee_name"],
        clock_in=r["clock_in"],
        clock_out=r.get("clock_out"),
        duration_minutes=int(duration) if duration is not None else None,
        date=str(r["date"]),
    )


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open_entry(self, *, employee_name: str, date: str) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_entries
                WHERE employee_name=%s AND `date`=%s AND clock_out IS NULL
                ORDER BY id DESC
                LIMIT 1
                """,
                (employee_name, date),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def create_open_entry(self, *, employee_name: str, clock_in: datetime, date: str) -> Optional[int]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO time_entries(employee_name, clock_in, `date`) VALUES(%s,%s,%s)",
                    (employee_name, clock_in, date),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            # uq_time_entries_open: another open entry won the race.
            if is_duplicate_key(e):
                return None
            raise

    def close_entry(self, *, entry_id: int, clock_out: datetime, duration_minutes: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET clock_out=%s, duration_minutes=%s
                WHERE id=%s AND clock_out IS NULL
                """,
                (clock_out, int(duration_minutes), int(entry_id)),
            )
            return cur.rowcount > 0

    def create_closed_entry(
        self,
        *,
        employee_name: str,
        clock_in: datetime,
        clock_out: datetime,
        duration_minutes: int,
        date: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(employee_name, clock_in, clock_out, duration_minutes, `date`)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_name, clock_in, clock_out, int(duration_minutes), date),
            )
            return int(cur.lastrowid)

    def list_entries(self, *, date: Optional[str] = None, employee_name: Optional[str] = None) -> Sequence[TimeEntry]:
        clauses = ["1=1"]
        params: list[object] = []
        if date:
            clauses.append("`date`=%s")
            params.append(date)
        if employee_name:
            clauses.append("employee_name=%s")
            params.append(employee_name)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM time_entries WHERE {where} ORDER BY clock_in DESC",
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_report_rows(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> Sequence[PayrollEntryRow]:
        clauses = ["clock_out IS NOT NULL"]
        params: list[object] = []

        if start_date and end_date:
            clauses.append("`date` BETWEEN %s AND %s")
            params.extend([start_date, end_date])
        if employee_name:
            clauses.append("employee_name=%s")
            params.append(employee_name)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_name, `date`, clock_in, clock_out, duration_minutes
                FROM time_entries
                WHERE {where}
                ORDER BY employee_name, `date`, clock_in
                """,
                tuple(params),
            )
            return [
                PayrollEntryRow(
                    employee_name=r["employee_name"],
                    date=str(r["date"]),
                    clock_in=r["clock_in"],
                    clock_out=r["clock_out"],
                    duration_minutes=int(r["duration_minutes"]) if r.get("duration_minutes") is not None else None,
                )
                for r in fetchall(cur)
            ]
