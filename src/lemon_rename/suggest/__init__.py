"""Strategy-based rename suggestion engine."""

from lemon_rename.suggest.base import (
    DUPLICATE_PENALTY,
    DuplicatePolicy,
    SuggestionContext,
    SuggestionStrategy,
)
from lemon_rename.suggest.engine import (
    NoteIndex,
    SuggestionEngine,
    create_default_engine,
    merge_suggestions,
)

__all__ = [
    "DUPLICATE_PENALTY",
    "DuplicatePolicy",
    "NoteIndex",
    "SuggestionContext",
    "SuggestionEngine",
    "SuggestionStrategy",
    "create_default_engine",
    "merge_suggestions",
]
