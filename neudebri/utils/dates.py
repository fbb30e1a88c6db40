"""
Date and time helpers.

Every date in the store is an ISO-8601 string. These helpers parse those
strings into timezone-aware datetimes so that date-only values
(``2024-10-15``), naive timestamps and ``Z``-suffixed timestamps can be
compared with each other.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

DAY = timedelta(days=1)
WEEK = timedelta(days=7)


def utc_now() -> datetime:
    """Default clock for the store."""
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """
    Format a datetime as a UTC ISO-8601 string with millisecond precision.

    Args:
        value: Datetime to format (naive values are taken as UTC)

    Returns:
        String such as ``2026-10-19T08:30:00.000Z``
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    stamp = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """
    Parse an ISO-8601 date or timestamp.

    Args:
        value: ISO date (``YYYY-MM-DD``) or timestamp, optionally ``Z``-suffixed

    Returns:
        Timezone-aware datetime (naive input is taken as UTC)

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_iso_or_none(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO string, returning None for empty or malformed values."""
    if not value:
        return None
    try:
        return parse_iso(value)
    except ValueError:
        return None


def start_of_day(now: datetime) -> datetime:
    """Midnight of the day containing ``now``, in ``now``'s timezone."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """Midnight of the Sunday that starts the week containing ``now``."""
    # weekday(): Monday=0 .. Sunday=6
    days_since_sunday = (now.weekday() + 1) % 7
    return start_of_day(now) - timedelta(days=days_since_sunday)


def in_window(value: datetime, start: datetime, length: timedelta) -> bool:
    """True when ``start <= value < start + length``."""
    return start <= value < start + length
