from __future__ import annotations

from typing import Sequence

from ...core.exceptions import ValidationError
from ..model import TimeEntry
from .base import ManualEntryDraft
from .reject_negative_policy import RejectNegativePolicy


class StrictPolicy(RejectNegativePolicy):
    """No negative durations and no overlap with the employee's closed entries that day."""

    needs_existing_entries = True

    def check(self, draft: ManualEntryDraft, existing: Sequence[TimeEntry]) -> None:
        super().check(draft, existing)

        for entry in existing:
            if entry.clock_out is None:
                continue
            # Touching intervals (one ends as the other starts) are fine.
            if draft.clock_in < entry.clock_out and entry.clock_in < draft.clock_out:
                raise ValidationError(
                    f"Entry overlaps an existing entry ({entry.clock_in:%H:%M}-{entry.clock_out:%H:%M})"
                )
