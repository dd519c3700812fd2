"""
Next-version strategy.

Active only once the user has shown a habit of versioned names (a
historical pattern containing ``v<digits>`` or ``版本``). Scans existing
notes sharing the heading's base name, finds the highest ``v<n>`` and
proposes ``Title-v{n+1}``, ``Title-V{n+1}`` and ``Title-版本{n+1}``.
"""

import re
from collections.abc import Iterable

from lemon_rename.core.constants import ICON_NUMBER, VERSION_PATTERN_RULES
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy
from lemon_rename.utils.filenames import normalize_for_comparison

VERSION_NUMBER_RE = re.compile(r"v(\d+)", re.IGNORECASE)
VERSION_SUFFIXES = ("-v", "-V", "-版本")
VERSION_SCORE = 75.0


def next_version(base_name: str, existing: Iterable[str]) -> int:
    """One more than the highest version among names sharing ``base_name``."""
    base = normalize_for_comparison(base_name)
    highest = 0
    for filename in existing:
        if not normalize_for_comparison(filename).startswith(base):
            continue
        match = VERSION_NUMBER_RE.search(filename)
        if match:
            highest = max(highest, int(match.group(1)))
    return highest + 1


class SmartVersionStrategy(SuggestionStrategy):
    """Proposes the next version of the heading."""

    name = "Smart Version"
    priority = 80

    def has_version_habit(self, context: SuggestionContext) -> bool:
        """Whether any historical pattern looks like a version marker."""
        return any(
            re.search(rule, pattern.value)
            for pattern in context.historical_patterns
            for rule in VERSION_PATTERN_RULES
        )

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        if not self.has_version_habit(context):
            return []

        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        version = next_version(title, context.existing_filenames)
        suggestions: list[RenameSuggestion] = []
        for suffix in VERSION_SUFFIXES:
            suggestion = self._suggest(
                f"{title}{suffix}{version}",
                VERSION_SCORE,
                ICON_NUMBER,
                f"version:{suffix}",
                context,
            )
            if suggestion:
                suggestions.append(suggestion)
        return suggestions
