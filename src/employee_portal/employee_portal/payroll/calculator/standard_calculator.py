from __future__ import annotations

from .base import PayrollCalculator
from ...time_entries.model import PayrollEntryRow


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: the duration recorded at clock-out, 0 when missing.

    No breaks, overtime or multi-day splitting.
    """

    def shift_minutes(self, row: PayrollEntryRow) -> int:
        return int(row.duration_minutes or 0)
