"""
Date-aware naming strategy.

Recognizes journal-like notes from keywords in the heading (or, failing
that, the parent folder name) and proposes period-prefixed names:

- daily      2024-05-01-Title     85
- weekly     2024-W18-Title       80
- monthly    2024-05-Title        78

Periods are taken from the note's creation time. A timestamp-suffixed
name (Title-202405011530, from the request time) is always proposed at 70.
"""

import math
from datetime import datetime

from lemon_rename.core.constants import (
    FOLDER_SCENARIO_KEYWORDS,
    ICON_CALENDAR,
    ICON_CHART,
    ICON_CLOCK,
    ICON_WEEK,
    TITLE_SCENARIO_KEYWORDS,
)
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy


def detect_scenarios(text: str, keywords: dict[str, frozenset[str]]) -> list[str]:
    """Scenario names whose keywords occur in the lowercased text."""
    lowered = text.lower()
    return [
        scenario
        for scenario, words in keywords.items()
        if any(word in lowered for word in words)
    ]


def format_week(value: datetime) -> str:
    """
    Week label such as ``2024-W07``.

    Weeks start on Sunday and week 1 is the one containing January 1st, so
    the label can differ from the ISO week number.
    """
    jan_first = datetime(value.year, 1, 1, tzinfo=value.tzinfo)
    days = (value - jan_first).days
    first_weekday = (jan_first.weekday() + 1) % 7
    week = math.ceil((days + first_weekday + 1) / 7)
    return f"{value.year}-W{week:02d}"


class TimeIntelligenceStrategy(SuggestionStrategy):
    """Proposes daily, weekly, monthly and timestamped names."""

    name = "Time Intelligence"
    priority = 87

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        scenarios = detect_scenarios(title, TITLE_SCENARIO_KEYWORDS)
        if not scenarios and note.folder_name:
            scenarios = detect_scenarios(note.folder_name, FOLDER_SCENARIO_KEYWORDS)

        created = note.created or context.now
        candidates = []
        if "daily" in scenarios:
            candidates.append(
                ("daily", f"{created:%Y-%m-%d}-{title}", 85, ICON_CALENDAR)
            )
        if "weekly" in scenarios:
            candidates.append(("weekly", f"{format_week(created)}-{title}", 80, ICON_WEEK))
        if "monthly" in scenarios:
            candidates.append(("monthly", f"{created:%Y-%m}-{title}", 78, ICON_CHART))
        candidates.append(
            ("timestamp", f"{title}-{context.now:%Y%m%d%H%M}", 70, ICON_CLOCK)
        )

        suggestions: list[RenameSuggestion] = []
        for scenario, name, score, icon in candidates:
            suggestion = self._suggest(
                name, score, icon, f"time-intelligence:{scenario}", context
            )
            if suggestion:
                suggestions.append(suggestion)
        return suggestions
