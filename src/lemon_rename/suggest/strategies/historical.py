"""
Heading plus historical prefix/suffix strategies.

Applies the user's most trusted past rename patterns to the note's
heading. Patterns are ranked by frequency * accept_rate * 100, which is
also the candidate's base score before the per-strategy cap.

Example:
    title "Report", pattern suffix "-v2" (frequency 5, accept rate 0.8)
    -> "Report-v2" with score min(400, 95) = 95
"""

import re
from abc import abstractmethod

from lemon_rename.core.constants import (
    ICON_TAG,
    PREFIX_ICON_RULES,
    SUFFIX_ICON_RULES,
    PatternType,
)
from lemon_rename.models.history import HistoricalPattern
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion, SuggestionStats
from lemon_rename.suggest.base import DuplicatePolicy, SuggestionContext, SuggestionStrategy


def pick_icon(value: str, rules: tuple[tuple[str, str], ...]) -> str:
    """Return the icon of the first rule matching a pattern value."""
    for pattern, icon in rules:
        if re.search(pattern, value):
            return icon
    return ICON_TAG


class _HistoricalAffixStrategy(SuggestionStrategy):
    """Shared logic for the suffix and prefix variants."""

    duplicate_policy = DuplicatePolicy.PENALIZE
    pattern_type: PatternType = PatternType.SUFFIX
    score_cap: float = 95.0
    icon_rules: tuple[tuple[str, str], ...] = SUFFIX_ICON_RULES

    @abstractmethod
    def _limit(self) -> int:
        """Number of top patterns to apply."""

    @abstractmethod
    def _apply(self, title: str, value: str) -> str:
        """Attach a pattern value to the heading."""

    def top_patterns(self, context: SuggestionContext) -> list[HistoricalPattern]:
        """Highest-weighted patterns of this strategy's type."""
        matching = [p for p in context.historical_patterns if p.type == self.pattern_type]
        matching.sort(key=lambda p: p.weight, reverse=True)
        return matching[: self._limit()]

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        suggestions: list[RenameSuggestion] = []
        for pattern in self.top_patterns(context):
            suggestion = self._suggest(
                self._apply(title, pattern.value),
                pattern.weight,
                pick_icon(pattern.value, self.icon_rules),
                pattern.key,
                context,
                cap=self.score_cap,
                stats=SuggestionStats(
                    usage_count=pattern.frequency,
                    accept_rate=pattern.accept_rate,
                    last_30d=pattern.frequency,
                ),
            )
            if suggestion:
                suggestions.append(suggestion)

        return suggestions


class H1WithHistoricalSuffixStrategy(_HistoricalAffixStrategy):
    """Heading + top historical suffixes, capped at 95."""

    name = "H1 + Historical Suffix"
    priority = 90
    pattern_type = PatternType.SUFFIX
    score_cap = 95.0
    icon_rules = SUFFIX_ICON_RULES

    def _limit(self) -> int:
        return self._config.historical_suffix_limit

    def _apply(self, title: str, value: str) -> str:
        return f"{title}{value}"


class H1WithHistoricalPrefixStrategy(_HistoricalAffixStrategy):
    """Top historical prefixes + heading, capped at 90."""

    name = "H1 + Historical Prefix"
    priority = 85
    pattern_type = PatternType.PREFIX
    score_cap = 90.0
    icon_rules = PREFIX_ICON_RULES

    def _limit(self) -> int:
        return self._config.historical_prefix_limit

    def _apply(self, title: str, value: str) -> str:
        return f"{value}{title}"
