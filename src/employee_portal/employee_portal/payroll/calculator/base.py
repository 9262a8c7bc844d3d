from __future__ import annotations

from abc import ABC, abstractmethod

from ...time_entries.model import PayrollEntryRow


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def shift_minutes(self, row: PayrollEntryRow) -> int:
        raise NotImplementedError
