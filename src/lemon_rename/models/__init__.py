"""Data models for rename history, suggestions and notes."""

from lemon_rename.models.history import (
    HistoricalPattern,
    RenamePattern,
    RenameRecord,
    SuggestionFeedback,
    make_pattern_key,
    make_record_key,
)
from lemon_rename.models.note import NoteFile, NoteRef
from lemon_rename.models.suggestion import RenameSuggestion, SuggestionStats

__all__ = [
    # History
    "RenameRecord",
    "SuggestionFeedback",
    "RenamePattern",
    "HistoricalPattern",
    "make_record_key",
    "make_pattern_key",
    # Suggestions
    "RenameSuggestion",
    "SuggestionStats",
    # Notes
    "NoteRef",
    "NoteFile",
]
