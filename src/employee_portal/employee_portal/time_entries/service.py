from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_datetime, round_minutes, today_str
from ..common.validators import optional_text, require_iso_date, require_non_empty
from ..core.exceptions import AlreadyClockedInError, NotClockedInError, ValidationError
from .factory import ManualEntryPolicyFactory
from .model import TimeEntry
from .policies.base import ManualEntryDraft, ManualEntryPolicy
from .policies.permissive_policy import PermissivePolicy
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


def _whole_seconds(value: datetime) -> datetime:
    # DATETIME columns keep whole seconds; compute durations from what is stored.
    return value.replace(microsecond=0)


@dataclass(frozen=True)
class ClockStatus:
    is_clocked_in: bool
    current_entry: Optional[TimeEntry]

    def to_dict(self) -> dict:
        return {
            "isClockedIn": self.is_clocked_in,
            "currentEntry": self.current_entry.to_dict() if self.current_entry else None,
        }


class TimeTrackingService:
    def __init__(
        self,
        entries: TimeEntryRepository,
        *,
        manual_entry_policy: ManualEntryPolicy | str | None = None,
        policy_factory: ManualEntryPolicyFactory | None = None,
    ):
        self._entries = entries
        if isinstance(manual_entry_policy, ManualEntryPolicy):
            self._policy = manual_entry_policy
        elif manual_entry_policy:
            self._policy = (policy_factory or ManualEntryPolicyFactory()).for_name(manual_entry_policy)
        else:
            self._policy = PermissivePolicy()

    def clock_in(self, employee_name: str, *, now: datetime | None = None) -> TimeEntry:
        employee_name = require_non_empty(employee_name, "employeeName")
        now = _whole_seconds(now or now_local())
        today = today_str(now)

        if self._entries.get_open_entry(employee_name=employee_name, date=today):
            logger.warning("Clock-in rejected, %s already clocked in on %s", employee_name, today)
            raise AlreadyClockedInError("Already clocked in")

        entry_id = self._entries.create_open_entry(employee_name=employee_name, clock_in=now, date=today)
        if entry_id is None:
            logger.warning("Clock-in lost race for %s on %s", employee_name, today)
            raise AlreadyClockedInError("Already clocked in")

        logger.info("%s clocked in at %s (entry %s)", employee_name, now.isoformat(), entry_id)
        return TimeEntry(
            id=entry_id,
            employee_name=employee_name,
            clock_in=now,
            clock_out=None,
            duration_minutes=None,
            date=today,
        )

    def clock_out(self, employee_name: str, *, now: datetime | None = None) -> TimeEntry:
        employee_name = require_non_empty(employee_name, "employeeName")
        now = _whole_seconds(now or now_local())
        today = today_str(now)

        entry = self._entries.get_open_entry(employee_name=employee_name, date=today)
        if not entry:
            logger.warning("Clock-out rejected, %s not clocked in on %s", employee_name, today)
            raise NotClockedInError("Not currently clocked in")

        duration = round_minutes(entry.clock_in, now)
        if not self._entries.close_entry(entry_id=entry.id, clock_out=now, duration_minutes=duration):
            raise NotClockedInError("Not currently clocked in")

        logger.info("%s clocked out after %d minutes (entry %s)", employee_name, duration, entry.id)
        return TimeEntry(
            id=entry.id,
            employee_name=entry.employee_name,
            clock_in=entry.clock_in,
            clock_out=now,
            duration_minutes=duration,
            date=entry.date,
        )

    def manual_entry(
        self,
        *,
        employee_name: Optional[str],
        clock_in: Optional[str],
        clock_out: Optional[str],
        date: Optional[str],
    ) -> TimeEntry:
        """Record an already-closed entry on behalf of an employee.

        Overlaps and negative spans are only rejected if the configured
        policy says so.
        """
        if not all(isinstance(v, str) and v.strip() for v in (employee_name, clock_in, clock_out, date)):
            raise ValidationError("All fields are required")

        draft = ManualEntryDraft(
            employee_name=employee_name.strip(),
            clock_in=_whole_seconds(parse_iso_datetime(clock_in, "clockIn")),
            clock_out=_whole_seconds(parse_iso_datetime(clock_out, "clockOut")),
            date=require_iso_date(date, "date"),
        )

        existing: Sequence[TimeEntry] = ()
        if self._policy.needs_existing_entries:
            existing = self._entries.list_entries(date=draft.date, employee_name=draft.employee_name)
        self._policy.check(draft, existing)

        duration = round_minutes(draft.clock_in, draft.clock_out)
        entry_id = self._entries.create_closed_entry(
            employee_name=draft.employee_name,
            clock_in=draft.clock_in,
            clock_out=draft.clock_out,
            duration_minutes=duration,
            date=draft.date,
        )
        logger.info("Manual entry %s recorded for %s on %s (%d minutes)", entry_id, draft.employee_name, draft.date, duration)
        return TimeEntry(
            id=entry_id,
            employee_name=draft.employee_name,
            clock_in=draft.clock_in,
            clock_out=draft.clock_out,
            duration_minutes=duration,
            date=draft.date,
        )

    def get_status(self, employee_name: str, *, now: datetime | None = None) -> ClockStatus:
        now = now or now_local()
        entry = self._entries.get_open_entry(employee_name=employee_name, date=today_str(now))
        return ClockStatus(is_clocked_in=entry is not None, current_entry=entry)

    def list_entries(self, *, date: Optional[str] = None, employee_name: Optional[str] = None) -> Sequence[TimeEntry]:
        return self._entries.list_entries(date=optional_text(date), employee_name=optional_text(employee_name))
