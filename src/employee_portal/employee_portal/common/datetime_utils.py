from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_iso_datetime(value: str, field_name: str = "datetime") -> datetime:
    """Parse an ISO-8601 timestamp into a naive local datetime.

    Accepts the browser forms ``2024-01-01T09:00`` and ``...Z``; aware values
    are converted to local time before the offset is dropped.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an ISO-8601 timestamp")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 timestamp")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def today_str(now: datetime) -> str:
    return format_iso_date(now.date())


def round_minutes(clock_in: datetime, clock_out: datetime) -> int:
    """Whole minutes between two instants, halves rounded away from zero."""
    seconds = Decimal(str((clock_out - clock_in).total_seconds()))
    return int((seconds / 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def minutes_to_hours(minutes: int) -> float:
    """Minutes as hours rounded to two decimals (half away from zero)."""
    hours = Decimal(int(minutes)) / 60
    return float(hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
