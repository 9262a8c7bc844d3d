from __future__ import annotations

from enum import Enum


class ManualEntryPolicyName(str, Enum):
    """How strictly administrative (manual) time entries are validated."""

    PERMISSIVE = "permissive"
    REJECT_NEGATIVE = "reject_negative"
    STRICT = "strict"


class DueStatus(str, Enum):
    """Derived due state of an incomplete project."""

    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
