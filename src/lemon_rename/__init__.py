"""Lemon Rename - rename suggestions for markdown notes.

Learns prefix/suffix habits from past renames, scores them by frequency,
recency and user feedback, and combines them with note-derived strategies
(headings, tags, folders, links, dates) into ranked filename suggestions.
"""

__version__ = "0.1.0"

from lemon_rename.core import (
    LemonRenameError,
    PatternType,
    RenameConfig,
    SuggestionType,
)

__all__ = [
    "__version__",
    # Core enums
    "PatternType",
    "SuggestionType",
    # Config
    "RenameConfig",
    # Base exception
    "LemonRenameError",
]
