"""
Sibling naming-convention strategy.

Looks at the other notes in the same folder. When at least 30% of them
follow one of the known conventions, the heading is proposed with that
convention applied:

- date prefix     2024-05-01-Title    (today's date)      85
- bracket prefix  [Project]-Title     (most common label) 82
- number prefix   007-Title           (highest + 1)       80
"""

import re

from lemon_rename.core.constants import ICON_CALENDAR, ICON_FOLDER, ICON_NUMBER
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy

DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
NUMBER_PREFIX_RE = re.compile(r"^(\d{2,4})-")
BRACKET_PREFIX_RE = re.compile(r"^\[(.+?)\]-")


class PathContextStrategy(SuggestionStrategy):
    """Applies the dominant naming convention of sibling notes."""

    name = "Path Context"
    priority = 88

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        siblings = [s for s in context.sibling_filenames if s != context.current_filename]
        if not siblings:
            return []

        suggestions: list[RenameSuggestion] = []
        for convention, name, score, icon in self.detect_conventions(siblings, context):
            suggestion = self._suggest(
                f"{name}-{title}", score, icon, f"path-context:{convention}", context
            )
            if suggestion:
                suggestions.append(suggestion)
        return suggestions

    def detect_conventions(
        self,
        siblings: list[str],
        context: SuggestionContext,
    ) -> list[tuple[str, str, float, str]]:
        """
        Detect conventions shared by enough siblings.

        Returns:
            (convention, prefix to apply, score, icon) tuples
        """
        threshold = len(siblings) * self._config.path_convention_ratio
        conventions: list[tuple[str, str, float, str]] = []

        dated = [s for s in siblings if DATE_PREFIX_RE.match(s)]
        if dated and len(dated) >= threshold:
            conventions.append(
                ("date-prefix", context.now.strftime("%Y-%m-%d"), 85, ICON_CALENDAR)
            )

        numbers: list[int] = []
        for sibling in siblings:
            if DATE_PREFIX_RE.match(sibling):
                continue
            match = NUMBER_PREFIX_RE.match(sibling)
            if match:
                numbers.append(int(match.group(1)))
        if numbers and len(numbers) >= threshold:
            conventions.append(
                ("number-prefix", f"{max(numbers) + 1:03d}", 80, ICON_NUMBER)
            )

        label_counts: dict[str, int] = {}
        for sibling in siblings:
            match = BRACKET_PREFIX_RE.match(sibling)
            if match:
                label = match.group(1)
                label_counts[label] = label_counts.get(label, 0) + 1
        if label_counts and sum(label_counts.values()) >= threshold:
            label = max(label_counts, key=lambda k: label_counts[k])
            conventions.append(("bracket-prefix", f"[{label}]", 82, ICON_FOLDER))

        return conventions
