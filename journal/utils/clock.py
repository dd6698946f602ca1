"""Calendar helpers in the journal's configured timezone."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def today_in(tz_name: str) -> date:
    """Calendar date right now in ``tz_name``."""
    return datetime.now(ZoneInfo(tz_name)).date()


def hour_label(hour: int) -> str:
    """Grid label for an hour slot, e.g. 9 -> "09:00"."""
    return f"{hour:02d}:00"


def parse_date_key(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` key, rejecting every other spelling."""
    if not isinstance(value, str) or len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD")
    return date.fromisoformat(value)
