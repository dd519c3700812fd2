"""
Keyword fallback strategy for notes without an H1.

Takes the first 500 characters of the body with code blocks and markdown
punctuation removed, counts words of 3 to 19 characters (numbers and
stop words excluded) and proposes joins of the most frequent ones:
top three with ``_`` (70), top two with ``-`` (68), and the top word (65).
"""

import re

from lemon_rename.core.constants import ICON_KEY, NUMERIC_PATTERN, STOP_WORDS
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy
from lemon_rename.utils.markdown import strip_code_blocks

MARKDOWN_PUNCTUATION_RE = re.compile(r"[#*`\[\]()]")
NUMERIC_RE = re.compile(NUMERIC_PATTERN)
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 19
MAX_KEYWORDS = 5


def extract_keywords(content: str, sample_chars: int = 500) -> list[str]:
    """
    Most frequent words of a note body, lowercased.

    Args:
        content: Raw markdown
        sample_chars: Number of characters considered after cleanup

    Returns:
        Up to five keywords, most frequent first, ties in order of appearance
    """
    text = MARKDOWN_PUNCTUATION_RE.sub(" ", strip_code_blocks(content))[:sample_chars]

    counts: dict[str, int] = {}
    for word in text.split():
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            continue
        if NUMERIC_RE.match(word):
            continue
        lowered = word.lower()
        counts[lowered] = counts.get(lowered, 0) + 1

    ranked = sorted(
        (item for item in counts.items() if item[0] not in STOP_WORDS),
        key=lambda item: item[1],
        reverse=True,
    )
    return [word for word, _ in ranked[:MAX_KEYWORDS]]


class KeywordExtractionStrategy(SuggestionStrategy):
    """Names untitled notes after their most frequent words."""

    name = "Keyword Extraction"
    priority = 70

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        if context.h1_title:
            return []

        keywords = extract_keywords(note.content, self._config.keyword_sample_chars)
        if not keywords:
            return []

        candidates = (
            ("_".join(keywords[:3]), 70.0),
            ("-".join(keywords[:2]), 68.0),
            (keywords[0], 65.0),
        )

        suggestions: list[RenameSuggestion] = []
        seen: set[str] = set()
        for name, score in candidates:
            if name in seen:
                continue
            seen.add(name)
            suggestion = self._suggest(name, score, ICON_KEY, "keyword-extraction", context)
            if suggestion:
                suggestions.append(suggestion)
        return suggestions
