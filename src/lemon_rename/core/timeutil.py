"""Epoch-millisecond clock and UTC day-bucket helpers."""

import time
from datetime import datetime, timezone

from lemon_rename.core.constants import MS_PER_DAY


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def to_date_key(timestamp_ms: int) -> str:
    """UTC calendar day (YYYY-MM-DD) containing the timestamp."""
    return ms_to_datetime(timestamp_ms).strftime("%Y-%m-%d")


def date_key_to_ms(date_key: str) -> int:
    """Start of the UTC day named by a YYYY-MM-DD key, in epoch milliseconds."""
    day = datetime.strptime(date_key, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    return int(day.timestamp() * 1000)


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def days_between(earlier_ms: int, later_ms: int) -> float:
    """Fractional days from earlier_ms to later_ms."""
    return (later_ms - earlier_ms) / MS_PER_DAY
