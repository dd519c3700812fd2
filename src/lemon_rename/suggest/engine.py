"""
Rename suggestion engine.

Runs every registered strategy against one note and merges the results
into a single ranked list.

Merging:
- Candidates are grouped by value; the highest score wins and the first
  strategy to reach that score keeps its icon and pattern key
- Empty names and the note's current name are dropped
- The survivors are sorted by descending score (stable) and truncated

A strategy that raises is logged and skipped; the others still run.
"""

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from lemon_rename.core.config import SuggestionConfig
from lemon_rename.models.history import HistoricalPattern
from lemon_rename.models.note import NoteFile, NoteRef
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy
from lemon_rename.suggest.strategies import (
    FolderNameStrategy,
    H1TitleStrategy,
    H1WithHistoricalPrefixStrategy,
    H1WithHistoricalSuffixStrategy,
    KeywordExtractionStrategy,
    LinkRelationshipStrategy,
    PathContextStrategy,
    SmartVersionStrategy,
    TagDrivenStrategy,
    TimeIntelligenceStrategy,
)
from lemon_rename.utils.filenames import sanitize_filename
from lemon_rename.utils.markdown import find_h1_title

logger = logging.getLogger(__name__)


@runtime_checkable
class NoteIndex(Protocol):
    """Anything that can enumerate the notes of a vault."""

    def list_notes(self) -> list[NoteRef]:
        ...


@dataclass
class StrategyStats:
    """Cumulative counters for one strategy."""

    invocations: int = 0
    suggestions: int = 0
    failures: int = 0
    duration_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "invocations": self.invocations,
            "suggestions": self.suggestions,
            "failures": self.failures,
            "duration_ms": round(self.duration_ms, 3),
        }


class SuggestionEngine:
    """
    Coordinates suggestion strategies.

    Example:
        engine = create_default_engine(vault)
        suggestions = engine.generate_suggestions(note, store.get_historical_patterns())
        for suggestion in suggestions:
            print(suggestion.icon, suggestion.value, suggestion.score)
    """

    def __init__(
        self,
        index: NoteIndex | None = None,
        config: SuggestionConfig | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            index: Source of existing note names, none means an empty vault
            config: Suggestion configuration, uses defaults if None
        """
        self._index = index
        self._config = config or SuggestionConfig()
        self._strategies: list[SuggestionStrategy] = []
        self._stats: dict[str, StrategyStats] = {}
        self._total_requests = 0

    @property
    def config(self) -> SuggestionConfig:
        """Return the current configuration."""
        return self._config

    @property
    def strategies(self) -> list[SuggestionStrategy]:
        """Registered strategies, highest priority first."""
        return list(self._strategies)

    def register_strategy(self, strategy: SuggestionStrategy) -> None:
        """Add a strategy, keeping the list ordered by priority."""
        self._strategies.append(strategy)
        self._strategies.sort(key=lambda s: s.priority, reverse=True)
        self._stats.setdefault(strategy.name, StrategyStats())

    def build_context(
        self,
        note: NoteFile,
        historical_patterns: Sequence[HistoricalPattern] = (),
        now: datetime | None = None,
    ) -> SuggestionContext:
        """Gather the shared inputs for one request."""
        current = note.basename
        existing = {current}
        siblings: list[str] = []

        if self._index is not None:
            for ref in self._index.list_notes():
                existing.add(ref.basename)
                if ref.folder == note.folder and ref.path != note.path:
                    siblings.append(ref.basename)

        return SuggestionContext(
            current_filename=current,
            h1_title=find_h1_title(note.content),
            historical_patterns=tuple(historical_patterns),
            existing_filenames=frozenset(existing),
            sibling_filenames=tuple(siblings),
            now=now or datetime.now(),
        )

    def generate_suggestions(
        self,
        note: NoteFile,
        historical_patterns: Sequence[HistoricalPattern] = (),
        max_suggestions: int | None = None,
        now: datetime | None = None,
    ) -> list[RenameSuggestion]:
        """
        Produce ranked rename suggestions for a note.

        Args:
            note: The note being renamed
            historical_patterns: Patterns mined from rename history
            max_suggestions: Result limit, defaults to the configured value
            now: Reference time for date-based names

        Returns:
            At most max_suggestions suggestions, highest score first
        """
        if max_suggestions is None:
            max_suggestions = self._config.max_suggestions

        context = self.build_context(note, historical_patterns, now)
        candidates: list[RenameSuggestion] = []

        for strategy in self._strategies:
            stats = self._stats.setdefault(strategy.name, StrategyStats())
            start_time = time.perf_counter()
            stats.invocations += 1
            try:
                produced = strategy.generate(note, context)
            except Exception as e:
                stats.failures += 1
                logger.error(f"Strategy '{strategy.name}' failed: {e}")
                continue
            finally:
                stats.duration_ms += (time.perf_counter() - start_time) * 1000

            stats.suggestions += len(produced)
            candidates.extend(produced)
            logger.debug(f"Strategy '{strategy.name}' produced {len(produced)} suggestions")

        merged = merge_suggestions(candidates, context.current_filename)
        self._total_requests += 1

        logger.debug(
            f"Generated {len(merged)} suggestions for '{context.current_filename}' "
            f"from {len(candidates)} candidates"
        )
        return merged[:max_suggestions]

    def get_stats(self) -> dict[str, Any]:
        """Get engine statistics."""
        return {
            "total_requests": self._total_requests,
            "strategies": {name: stats.to_dict() for name, stats in self._stats.items()},
        }

    def reset_stats(self) -> None:
        """Reset engine statistics."""
        self._total_requests = 0
        self._stats = {strategy.name: StrategyStats() for strategy in self._strategies}


def merge_suggestions(
    candidates: Iterable[RenameSuggestion],
    current_filename: str,
) -> list[RenameSuggestion]:
    """
    Deduplicate by value keeping the highest score, then rank.

    On equal scores the earlier candidate is kept.
    """
    best: dict[str, RenameSuggestion] = {}
    for suggestion in candidates:
        if not sanitize_filename(suggestion.value) or suggestion.value == current_filename:
            continue
        existing = best.get(suggestion.value)
        if existing is None or suggestion.score > existing.score:
            best[suggestion.value] = suggestion

    return sorted(best.values(), key=lambda s: s.score, reverse=True)


def create_default_engine(
    index: NoteIndex | None = None,
    config: SuggestionConfig | None = None,
) -> SuggestionEngine:
    """Build an engine with every built-in strategy registered."""
    engine = SuggestionEngine(index, config)
    for strategy_cls in (
        H1TitleStrategy,
        TagDrivenStrategy,
        H1WithHistoricalSuffixStrategy,
        PathContextStrategy,
        TimeIntelligenceStrategy,
        H1WithHistoricalPrefixStrategy,
        LinkRelationshipStrategy,
        FolderNameStrategy,
        SmartVersionStrategy,
        KeywordExtractionStrategy,
    ):
        engine.register_strategy(strategy_cls(engine.config))
    return engine
