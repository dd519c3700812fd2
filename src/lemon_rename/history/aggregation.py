"""
Rolling-window aggregation of event timestamps.

Events are kept as raw epoch-millisecond timestamps while they are inside
the recent window (24 hours by default). Once older, they are folded into
one counter per UTC calendar day, and day counters past the retention
horizon are dropped. Memory per record is therefore bounded by the number
of events in the last day plus one integer per active day.

Complexity:
- fold_expired: O(r) where r is the number of raw timestamps
- purge_daily: O(d) where d is the number of day buckets
- count_in_time_range: O(r + d)
"""

from typing import Protocol, runtime_checkable

from lemon_rename.core.constants import (
    DEFAULT_RECENT_WINDOW_HOURS,
    DEFAULT_RETENTION_DAYS,
    MS_PER_DAY,
    MS_PER_HOUR,
)
from lemon_rename.core.timeutil import to_date_key


@runtime_checkable
class EventLog(Protocol):
    """Anything carrying raw recent timestamps and per-day counts."""

    recent_timestamps: list[int]
    daily_count: dict[str, int]


def fold_expired(
    log: EventLog,
    now: int,
    window_hours: int = DEFAULT_RECENT_WINDOW_HOURS,
) -> int:
    """
    Move raw timestamps older than the recent window into day buckets.

    Args:
        log: Record or feedback entry to update in place
        now: Reference time in epoch milliseconds
        window_hours: Width of the raw-timestamp window

    Returns:
        Number of timestamps folded
    """
    cutoff = now - window_hours * MS_PER_HOUR
    expired = [ts for ts in log.recent_timestamps if ts < cutoff]
    if not expired:
        return 0

    for ts in expired:
        day = to_date_key(ts)
        log.daily_count[day] = log.daily_count.get(day, 0) + 1

    log.recent_timestamps = [ts for ts in log.recent_timestamps if ts >= cutoff]
    return len(expired)


def purge_daily(
    log: EventLog,
    now: int,
    retention_days: int = DEFAULT_RETENTION_DAYS,
) -> int:
    """
    Delete day buckets dated before the retention horizon.

    Returns:
        Number of buckets removed
    """
    cutoff_day = to_date_key(now - retention_days * MS_PER_DAY)
    stale = [day for day in log.daily_count if day < cutoff_day]
    for day in stale:
        del log.daily_count[day]
    return len(stale)


def record_event(
    log: EventLog,
    now: int,
    window_hours: int = DEFAULT_RECENT_WINDOW_HOURS,
    retention_days: int = DEFAULT_RETENTION_DAYS,
) -> None:
    """
    Register one event at ``now``.

    Existing raw timestamps are folded first; the new timestamp is then
    appended raw, and expired day buckets are purged.
    """
    fold_expired(log, now, window_hours)
    log.recent_timestamps.append(now)
    purge_daily(log, now, retention_days)


def compact(
    log: EventLog,
    now: int,
    window_hours: int = DEFAULT_RECENT_WINDOW_HOURS,
    retention_days: int = DEFAULT_RETENTION_DAYS,
) -> None:
    """Fold and purge without recording a new event."""
    fold_expired(log, now, window_hours)
    purge_daily(log, now, retention_days)


def count_in_time_range(
    log: EventLog,
    hours: float,
    now: int,
    window_hours: int = DEFAULT_RECENT_WINDOW_HOURS,
) -> int:
    """
    Count events within the last ``hours`` hours.

    Windows up to the recent window are exact. Wider windows add every raw
    timestamp (whatever its age) to the day buckets on or after the cutoff
    day, so a raw timestamp older than the requested window is still
    counted.
    """
    cutoff = now - int(hours * MS_PER_HOUR)

    if hours <= window_hours:
        return sum(1 for ts in log.recent_timestamps if ts >= cutoff)

    cutoff_day = to_date_key(cutoff)
    daily_sum = sum(
        count for day, count in log.daily_count.items() if day >= cutoff_day
    )
    return daily_sum + len(log.recent_timestamps)
