from __future__ import annotations

from datetime import datetime

import pytest

from src.employee_portal.employee_portal.core.exceptions import ValidationError
from src.employee_portal.employee_portal.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.employee_portal.employee_portal.payroll.service import PayrollReportService
from src.employee_portal.employee_portal.time_entries.model import PayrollEntryRow
from src.employee_portal.employee_portal.time_entries.service import TimeTrackingService


def _add(repo, name, date, start, end, minutes):
    return repo.create_closed_entry(
        employee_name=name,
        clock_in=datetime.fromisoformat(f"{date}T{start}"),
        clock_out=datetime.fromisoformat(f"{date}T{end}"),
        duration_minutes=minutes,
        date=date,
    )


def test_report_sums_shifts_per_employee(time_entries):
    _add(time_entries, "Kyla Abbott", "2024-01-10", "09:00", "11:00", 120)
    _add(time_entries, "Kyla Abbott", "2024-01-11", "09:00", "12:00", 180)

    report = PayrollReportService(time_entries).generate_report()

    assert len(report.employees) == 1
    kyla = report.employees[0]
    assert kyla.total_minutes == 300
    assert kyla.total_hours == 5.0
    assert [s["hours"] for s in kyla.shifts] == [2.0, 3.0]
    assert report.start_date == "All"
    assert report.end_date == "All"


def test_report_skips_open_entries(time_entries, fixed_now):
    time_entries.create_open_entry(employee_name="Brendan Abbott", clock_in=fixed_now, date="2024-01-15")
    _add(time_entries, "Kyla Abbott", "2024-01-10", "09:00", "10:00", 60)

    report = PayrollReportService(time_entries).generate_report()

    assert [e.employee_name for e in report.employees] == ["Kyla Abbott"]
    assert len(report.entries) == 1


def test_range_applies_only_when_both_ends_are_given(time_entries):
    service = PayrollReportService(time_entries)

    service.generate_report(start_date="2024-01-01")
    assert time_entries.last_report_filters == {"start_date": None, "end_date": None, "employee_name": None}

    report = service.generate_report(start_date="2024-01-01", end_date="2024-01-31", employee_name="Kyla Abbott")
    assert time_entries.last_report_filters == {
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
        "employee_name": "Kyla Abbott",
    }
    assert report.to_dict()["startDate"] == "2024-01-01"


def test_range_excludes_outside_dates(time_entries):
    _add(time_entries, "Kyla Abbott", "2023-12-31", "09:00", "10:00", 60)
    _add(time_entries, "Kyla Abbott", "2024-01-02", "09:00", "10:30", 90)

    report = PayrollReportService(time_entries).generate_report(start_date="2024-01-01", end_date="2024-01-31")

    assert report.employees[0].total_hours == 1.5


def test_inverted_range_is_rejected(time_entries):
    with pytest.raises(ValidationError):
        PayrollReportService(time_entries).generate_report(start_date="2024-02-01", end_date="2024-01-01")


def test_hours_round_half_up_to_two_decimals(time_entries):
    # 1 minute is 0.01666.. hours
    _add(time_entries, "Kyla Abbott", "2024-01-10", "09:00", "09:01", 1)

    report = PayrollReportService(time_entries).generate_report()

    assert report.entries[0]["hours"] == 0.02


def test_standard_calculator_uses_recorded_duration():
    row = PayrollEntryRow(
        employee_name="Kyla Abbott",
        date="2024-01-10",
        clock_in=datetime(2024, 1, 10, 9, 0),
        clock_out=datetime(2024, 1, 10, 17, 0),
        duration_minutes=None,
    )

    assert StandardPayrollCalculator().shift_minutes(row) == 0


def test_full_day_shift_reports_eight_and_a_half_hours(time_entries):
    tracking = TimeTrackingService(time_entries)
    tracking.clock_in("Kyla Abbott", now=datetime(2024, 1, 10, 9, 0))
    closed = tracking.clock_out("Kyla Abbott", now=datetime(2024, 1, 10, 17, 30))

    report = PayrollReportService(time_entries).generate_report(start_date="2024-01-10", end_date="2024-01-10")

    assert closed.duration_minutes == 510
    assert report.employees[0].total_hours == 8.5
    assert report.entries[0]["hours"] == 8.5
