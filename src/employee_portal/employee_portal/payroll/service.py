from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import minutes_to_hours
from ..common.validators import optional_text, require_iso_date
from ..core.constants import ALL_DATES_LABEL
from ..core.exceptions import ValidationError
from ..time_entries.repository import TimeEntryRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator

logger = logging.getLogger(__name__)


@dataclass
class EmployeePayroll:
    employee_name: str
    total_minutes: int = 0
    shifts: list[dict] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return minutes_to_hours(self.total_minutes)

    def to_dict(self) -> dict:
        return {
            "employee_name": self.employee_name,
            "total_minutes": self.total_minutes,
            "total_hours": self.total_hours,
            "shifts": list(self.shifts),
        }


@dataclass(frozen=True)
class PayrollReport:
    start_date: str
    end_date: str
    employees: list[EmployeePayroll]
    entries: list[dict]

    def to_dict(self) -> dict:
        return {
            "startDate": self.start_date,
            "endDate": self.end_date,
            "employees": [e.to_dict() for e in self.employees],
            "entries": list(self.entries),
        }


class PayrollReportService:
    def __init__(
        self,
        entries: TimeEntryRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._entries = entries
        self._calculator = calculator or StandardPayrollCalculator()

    def generate_report(
        self,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> PayrollReport:
        """Group closed entries by employee with per-shift and total hours.

        The date range applies only when both ends are given.
        """
        start = require_iso_date(start_date, "startDate") if optional_text(start_date) else None
        end = require_iso_date(end_date, "endDate") if optional_text(end_date) else None
        if start and end and start > end:
            raise ValidationError("startDate must not be after endDate")
        ranged = bool(start and end)

        query_rows = self._entries.get_report_rows(
            start_date=start if ranged else None,
            end_date=end if ranged else None,
            employee_name=optional_text(employee_name),
        )

        by_employee: dict[str, EmployeePayroll] = {}
        flat: list[dict] = []

        for r in query_rows:
            minutes = self._calculator.shift_minutes(r)
            hours = minutes_to_hours(minutes)

            flat.append(
                {
                    "employee_name": r.employee_name,
                    "date": r.date,
                    "clock_in": r.clock_in.isoformat(),
                    "clock_out": r.clock_out.isoformat(),
                    "duration_minutes": r.duration_minutes,
                    "hours": hours,
                }
            )

            emp = by_employee.get(r.employee_name)
            if not emp:
                emp = EmployeePayroll(employee_name=r.employee_name)
                by_employee[r.employee_name] = emp
            emp.total_minutes += minutes
            emp.shifts.append(
                {
                    "date": r.date,
                    "clock_in": r.clock_in.isoformat(),
                    "clock_out": r.clock_out.isoformat(),
                    "hours": hours,
                }
            )

        logger.info(
            "Payroll report %s..%s: %d employees, %d shifts",
            start or ALL_DATES_LABEL,
            end or ALL_DATES_LABEL,
            len(by_employee),
            len(flat),
        )
        return PayrollReport(
            start_date=start_date or ALL_DATES_LABEL,
            end_date=end_date or ALL_DATES_LABEL,
            employees=list(by_employee.values()),
            entries=flat,
        )
