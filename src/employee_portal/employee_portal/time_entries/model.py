from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/clock-out span of an employee.

    An entry is *open* while clock_out is None; duration_minutes is set
    together with clock_out and never changes afterwards.
    """

    id: int
    employee_name: str
    clock_in: datetime
    clock_out: Optional[datetime]
    duration_minutes: Optional[int]
    date: str

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_name": self.employee_name,
            "clock_in": _iso(self.clock_in),
            "clock_out": _iso(self.clock_out),
            "duration_minutes": self.duration_minutes,
            "date": self.date,
        }


@dataclass(frozen=True)
class PayrollEntryRow:
    """Read-model for the payroll report (closed entries only)."""

    employee_name: str
    date: str
    clock_in: datetime
    clock_out: datetime
    duration_minutes: Optional[int]
