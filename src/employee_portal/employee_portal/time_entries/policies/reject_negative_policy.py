from __future__ import annotations

from typing import Sequence

from ...core.exceptions import ValidationError
from ..model import TimeEntry
from .base import ManualEntryDraft, ManualEntryPolicy


class RejectNegativePolicy(ManualEntryPolicy):
    """Reject entries whose clock-out precedes their clock-in."""

    def check(self, draft: ManualEntryDraft, existing: Sequence[TimeEntry]) -> None:
        if draft.clock_out < draft.clock_in:
            raise ValidationError("Clock out must not be before clock in")
