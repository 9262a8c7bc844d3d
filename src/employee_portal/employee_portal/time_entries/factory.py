from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ManualEntryPolicyName
from ..core.exceptions import ValidationError
from .policies.base import ManualEntryPolicy
from .policies.permissive_policy import PermissivePolicy
from .policies.reject_negative_policy import RejectNegativePolicy
from .policies.strict_policy import StrictPolicy


@dataclass
class ManualEntryPolicyFactory:
    """Factory Pattern: choose the manual entry policy from configuration."""

    def for_name(self, name: str | ManualEntryPolicyName) -> ManualEntryPolicy:
        try:
            policy_name = ManualEntryPolicyName(str(getattr(name, "value", name)).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown manual entry policy: {name!r}")

        if policy_name == ManualEntryPolicyName.STRICT:
            return StrictPolicy()
        if policy_name == ManualEntryPolicyName.REJECT_NEGATIVE:
            return RejectNegativePolicy()
        return PermissivePolicy()
