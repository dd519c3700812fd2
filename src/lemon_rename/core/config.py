"""Lemon Rename configuration loading and validation."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from lemon_rename.core.constants import (
    DEFAULT_ACCEPT_RATE,
    DEFAULT_HISTORICAL_PREFIX_LIMIT,
    DEFAULT_HISTORICAL_SUFFIX_LIMIT,
    DEFAULT_KEYWORD_SAMPLE_CHARS,
    DEFAULT_MAX_QUICK_SUGGESTIONS,
    DEFAULT_MAX_RECORDS,
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_MEDIUM_DECAY,
    DEFAULT_MIN_ACCEPT_RATE,
    DEFAULT_PATH_CONVENTION_RATIO,
    DEFAULT_PATTERN_WINDOW_DAYS,
    DEFAULT_RECENT_DAYS,
    DEFAULT_RECENT_DECAY,
    DEFAULT_RECENT_WINDOW_HOURS,
    DEFAULT_RETENTION_DAYS,
    DEFAULT_SCORE_SCALE,
    DEFAULT_STALE_DAYS,
    DEFAULT_STALE_DECAY,
    HISTORY_FILE,
    get_config_path,
)
from lemon_rename.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class HistoryConfig:
    """Rename history retention configuration."""

    max_records: int = DEFAULT_MAX_RECORDS
    retention_days: int = DEFAULT_RETENTION_DAYS
    pattern_window_days: int = DEFAULT_PATTERN_WINDOW_DAYS
    recent_window_hours: int = DEFAULT_RECENT_WINDOW_HOURS


@dataclass(frozen=True)
class ScoringConfig:
    """Pattern scoring configuration."""

    recent_days: float = DEFAULT_RECENT_DAYS
    stale_days: float = DEFAULT_STALE_DAYS
    recent_decay: float = DEFAULT_RECENT_DECAY
    medium_decay: float = DEFAULT_MEDIUM_DECAY
    stale_decay: float = DEFAULT_STALE_DECAY
    min_accept_rate: float = DEFAULT_MIN_ACCEPT_RATE
    default_accept_rate: float = DEFAULT_ACCEPT_RATE
    score_scale: float = DEFAULT_SCORE_SCALE


@dataclass(frozen=True)
class SuggestionConfig:
    """Suggestion generation configuration."""

    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    max_quick_suggestions: int = DEFAULT_MAX_QUICK_SUGGESTIONS
    path_convention_ratio: float = DEFAULT_PATH_CONVENTION_RATIO
    keyword_sample_chars: int = DEFAULT_KEYWORD_SAMPLE_CHARS
    historical_suffix_limit: int = DEFAULT_HISTORICAL_SUFFIX_LIMIT
    historical_prefix_limit: int = DEFAULT_HISTORICAL_PREFIX_LIMIT


@dataclass(frozen=True)
class StorageConfig:
    """Storage paths configuration, relative to the .lemon directory."""

    history_file: str = HISTORY_FILE


@dataclass(frozen=True)
class RenameConfig:
    """Complete Lemon Rename configuration."""

    version: str = "1.0"
    history: HistoryConfig = field(default_factory=HistoryConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from dictionary."""
        return cls(
            version=data.get("version", "1.0"),
            history=HistoryConfig(**data.get("history", {})),
            scoring=ScoringConfig(**data.get("scoring", {})),
            suggestions=SuggestionConfig(**data.get("suggestions", {})),
            storage=StorageConfig(**data.get("storage", {})),
        )

    @classmethod
    def load(cls, base_path: Path | None = None) -> Self:
        """Load configuration from file or use defaults."""
        config_path = get_config_path(base_path)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.from_dict(data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                details={"path": str(config_path)},
            ) from e
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(
                f"Invalid configuration values: {e}",
                details={"path": str(config_path)},
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "version": self.version,
            "history": {
                "max_records": self.history.max_records,
                "retention_days": self.history.retention_days,
                "pattern_window_days": self.history.pattern_window_days,
                "recent_window_hours": self.history.recent_window_hours,
            },
            "scoring": {
                "recent_days": self.scoring.recent_days,
                "stale_days": self.scoring.stale_days,
                "recent_decay": self.scoring.recent_decay,
                "medium_decay": self.scoring.medium_decay,
                "stale_decay": self.scoring.stale_decay,
                "min_accept_rate": self.scoring.min_accept_rate,
                "default_accept_rate": self.scoring.default_accept_rate,
                "score_scale": self.scoring.score_scale,
            },
            "suggestions": {
                "max_suggestions": self.suggestions.max_suggestions,
                "max_quick_suggestions": self.suggestions.max_quick_suggestions,
                "path_convention_ratio": self.suggestions.path_convention_ratio,
                "keyword_sample_chars": self.suggestions.keyword_sample_chars,
                "historical_suffix_limit": self.suggestions.historical_suffix_limit,
                "historical_prefix_limit": self.suggestions.historical_prefix_limit,
            },
            "storage": {
                "history_file": self.storage.history_file,
            },
        }

    def save(self, base_path: Path | None = None) -> None:
        """Save configuration to file."""
        config_path = get_config_path(base_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
