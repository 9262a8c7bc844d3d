from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from ..model import TimeEntry


@dataclass(frozen=True)
class ManualEntryDraft:
    employee_name: str
    clock_in: datetime
    clock_out: datetime
    date: str


class ManualEntryPolicy(ABC):
    """Strategy Pattern: decide whether an administrative entry is acceptable."""

    #: Whether check() needs the employee's other entries for the date.
    needs_existing_entries: bool = False

    @abstractmethod
    def check(self, draft: ManualEntryDraft, existing: Sequence[TimeEntry]) -> None:
        """Raise ValidationError to reject the draft."""

        raise NotImplementedError
