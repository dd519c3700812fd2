"""
Prefix/suffix pattern extraction from rename history.

A rename whose new name is the old name plus something appended yields a
suffix pattern; plus something prepended yields a prefix pattern. Pure
numbers and auto-generated timestamp fragments are noise and never become
patterns.

Example:
    "Meeting" -> "Meeting-draft"      suffix "-draft"
    "Plan"    -> "[Work]Plan"         prefix "[Work]"
    "Meeting" -> "Meeting-1700000000000"   rejected (millisecond timestamp)
"""

import re
from collections.abc import Iterable

from lemon_rename.core.constants import (
    DATE_PREFIX_PATTERN,
    DEFAULT_PATTERN_WINDOW_DAYS,
    DEFAULT_RECENT_WINDOW_HOURS,
    MS_PER_DAY,
    NUMERIC_PATTERN,
    TIMESTAMP_SUFFIX_PATTERN,
    PatternType,
)
from lemon_rename.history.aggregation import count_in_time_range
from lemon_rename.models.history import RenamePattern, RenameRecord

_NUMERIC_RE = re.compile(NUMERIC_PATTERN)
_TIMESTAMP_SUFFIX_RE = re.compile(TIMESTAMP_SUFFIX_PATTERN)
_DATE_PREFIX_RE = re.compile(DATE_PREFIX_PATTERN)


def detect_pattern(old_name: str, new_name: str) -> RenamePattern | None:
    """
    Derive the single prefix or suffix pattern explaining a rename.

    The suffix case is decided first: when the new name starts with the
    old name, only the appended remainder is considered.

    Returns:
        RenamePattern with count 0, or None when the rename is not a pure
        extension or the added text is noise
    """
    if new_name.startswith(old_name):
        suffix = new_name[len(old_name):]
        if not suffix or _NUMERIC_RE.match(suffix) or _TIMESTAMP_SUFFIX_RE.match(suffix):
            return None
        return RenamePattern(type=PatternType.SUFFIX, value=suffix)

    if new_name.endswith(old_name):
        prefix = new_name[: len(new_name) - len(old_name)]
        if not prefix or _NUMERIC_RE.match(prefix) or _DATE_PREFIX_RE.match(prefix):
            return None
        return RenamePattern(type=PatternType.PREFIX, value=prefix)

    return None


def collect_pattern_sources(
    records: Iterable[RenameRecord],
    now: int,
    window_days: int = DEFAULT_PATTERN_WINDOW_DAYS,
) -> dict[str, tuple[RenamePattern, list[RenameRecord]]]:
    """
    Group non-stale records by the pattern they exhibit.

    Returns:
        Mapping of pattern key to (pattern template, contributing records)
    """
    cutoff = now - window_days * MS_PER_DAY
    groups: dict[str, tuple[RenamePattern, list[RenameRecord]]] = {}

    for record in records:
        if record.last_used < cutoff:
            continue

        pattern = detect_pattern(record.old_name, record.new_name)
        if pattern is None:
            continue

        if pattern.key not in groups:
            groups[pattern.key] = (pattern, [])
        groups[pattern.key][1].append(record)

    return groups


def extract_patterns(
    records: Iterable[RenameRecord],
    now: int,
    window_days: int = DEFAULT_PATTERN_WINDOW_DAYS,
    recent_window_hours: int = DEFAULT_RECENT_WINDOW_HOURS,
) -> list[RenamePattern]:
    """
    Mine merged prefix/suffix patterns from rename records.

    Identical (type, value) patterns are merged by summing each record's
    event count over the window and keeping the latest use.

    Complexity: O(n) in the number of records
    """
    patterns: list[RenamePattern] = []
    window_hours = window_days * 24

    for template, sources in collect_pattern_sources(records, now, window_days).values():
        patterns.append(
            RenamePattern(
                type=template.type,
                value=template.value,
                count=sum(
                    count_in_time_range(r, window_hours, now, recent_window_hours)
                    for r in sources
                ),
                last_used=max(r.last_used for r in sources),
            )
        )

    return patterns
