"""Data models for rename history and pattern mining."""

from dataclasses import dataclass, field
from typing import Any

from lemon_rename.core.constants import RECORD_KEY_SEPARATOR, PatternType
from lemon_rename.core.timeutil import date_key_to_ms


def make_record_key(old_name: str, new_name: str) -> str:
    """Build the history key for an old/new name pair."""
    return f"{old_name}{RECORD_KEY_SEPARATOR}{new_name}"


def make_pattern_key(pattern_type: PatternType | str, value: str) -> str:
    """Build the feedback key for a pattern, e.g. ``suffix:-draft``."""
    type_value = pattern_type.value if isinstance(pattern_type, PatternType) else pattern_type
    return f"{type_value}:{value}"


def _latest_timestamp(recent_timestamps: list[int], daily_count: dict[str, int]) -> int:
    if recent_timestamps:
        return max(recent_timestamps)
    if daily_count:
        return date_key_to_ms(max(daily_count))
    return 0


@dataclass
class RenameRecord:
    """Every observed rename of one exact old/new name pair.

    Events newer than the rolling window stay as raw timestamps; older
    events are folded into per-day counts.
    """

    old_name: str
    new_name: str
    recent_timestamps: list[int] = field(default_factory=list)
    daily_count: dict[str, int] = field(default_factory=dict)

    @property
    def key(self) -> str:
        """History key of this record."""
        return make_record_key(self.old_name, self.new_name)

    @property
    def last_used(self) -> int:
        """Most recent event time in epoch milliseconds (0 if empty)."""
        return _latest_timestamp(self.recent_timestamps, self.daily_count)

    @property
    def total_count(self) -> int:
        """All retained events, raw and aggregated."""
        return len(self.recent_timestamps) + sum(self.daily_count.values())


@dataclass
class SuggestionFeedback:
    """Accept/reject signal for suggestions carrying one pattern key."""

    pattern_key: str
    recent_timestamps: list[int] = field(default_factory=list)
    daily_count: dict[str, int] = field(default_factory=dict)
    accepted: int = 0
    rejected: int = 0

    @property
    def last_used(self) -> int:
        """Most recent feedback time in epoch milliseconds (0 if empty)."""
        return _latest_timestamp(self.recent_timestamps, self.daily_count)

    @property
    def total(self) -> int:
        """Number of accept and reject signals."""
        return self.accepted + self.rejected

    @property
    def accept_rate(self) -> float:
        """Raw acceptance ratio, 0.0 when no signal was recorded."""
        if self.total == 0:
            return 0.0
        return self.accepted / self.total


@dataclass
class RenamePattern:
    """Prefix or suffix transformation mined from history."""

    type: PatternType
    value: str
    count: int = 0
    last_used: int = 0

    @property
    def key(self) -> str:
        """Feedback key of this pattern."""
        return make_pattern_key(self.type, self.value)

    def apply(self, name: str) -> str:
        """Apply the transformation to a name."""
        if self.type == PatternType.SUFFIX:
            return f"{name}{self.value}"
        return f"{self.value}{name}"


@dataclass(frozen=True)
class HistoricalPattern:
    """Public projection of a mined pattern consumed by strategies."""

    type: PatternType
    value: str
    frequency: int
    last_used: int
    accept_rate: float

    @property
    def key(self) -> str:
        """Feedback key of this pattern."""
        return make_pattern_key(self.type, self.value)

    @property
    def weight(self) -> float:
        """Ranking weight used by the historical strategies."""
        return self.frequency * self.accept_rate * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "value": self.value,
            "frequency": self.frequency,
            "last_used": self.last_used,
            "accept_rate": self.accept_rate,
        }
