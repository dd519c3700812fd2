"""Data models for rename suggestions."""

from dataclasses import dataclass
from typing import Any

from lemon_rename.core.constants import SuggestionType


@dataclass(frozen=True)
class SuggestionStats:
    """Usage statistics shown alongside a history-backed suggestion."""

    usage_count: int = 0
    accept_rate: float = 0.0
    last_24h: int = 0
    last_7d: int = 0
    last_30d: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "usage_count": self.usage_count,
            "accept_rate": self.accept_rate,
            "last_24h": self.last_24h,
            "last_7d": self.last_7d,
            "last_30d": self.last_30d,
        }


@dataclass(frozen=True)
class RenameSuggestion:
    """A ranked candidate filename."""

    label: str
    value: str
    type: SuggestionType
    score: float
    icon: str
    pattern_key: str | None = None
    stats: SuggestionStats | None = None

    @property
    def is_smart(self) -> bool:
        """Check if this suggestion came from history or note context."""
        return self.type == SuggestionType.SMART

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "value": self.value,
            "type": self.type.value,
            "score": self.score,
            "icon": self.icon,
            "pattern_key": self.pattern_key,
            "stats": self.stats.to_dict() if self.stats else None,
        }
