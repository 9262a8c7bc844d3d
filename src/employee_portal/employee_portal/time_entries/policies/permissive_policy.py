from __future__ import annotations

from typing import Sequence

from ..model import TimeEntry
from .base import ManualEntryDraft, ManualEntryPolicy


class PermissivePolicy(ManualEntryPolicy):
    """Accept every entry, negative or overlapping ones included."""

    def check(self, draft: ManualEntryDraft, existing: Sequence[TimeEntry]) -> None:
        return None
