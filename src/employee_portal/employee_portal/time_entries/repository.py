from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PayrollEntryRow, TimeEntry


class TimeEntryRepository(Protocol):
    def get_open_entry(self, *, employee_name: str, date: str) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create_open_entry(self, *, employee_name: str, clock_in: datetime, date: str) -> Optional[int]:
        """Insert an open entry.

        Returns None when the employee already has an open entry for the date.
        """

        raise NotImplementedError

    def close_entry(self, *, entry_id: int, clock_out: datetime, duration_minutes: int) -> bool:
        """Close an entry that is still open. False when it was already closed."""

        raise NotImplementedError

    def create_closed_entry(
        self,
        *,
        employee_name: str,
        clock_in: datetime,
        clock_out: datetime,
        duration_minutes: int,
        date: str,
    ) -> int:
        raise NotImplementedError

    def list_entries(self, *, date: Optional[str] = None, employee_name: Optional[str] = None) -> Sequence[TimeEntry]:
        """Entries matching the optional filters, newest clock_in first."""

        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> Sequence[PayrollEntryRow]:
        raise NotImplementedError
