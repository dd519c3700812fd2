"""Core constants, configuration and exceptions."""

from lemon_rename.core.config import (
    HistoryConfig,
    RenameConfig,
    ScoringConfig,
    StorageConfig,
    SuggestionConfig,
)
from lemon_rename.core.constants import PatternType, SuggestionType
from lemon_rename.core.exceptions import (
    ConfigurationError,
    HistoryError,
    LemonRenameError,
    NoteFileError,
    NoteNotFoundError,
    NoteParseError,
    PersistenceError,
)

__all__ = [
    # Enums
    "PatternType",
    "SuggestionType",
    # Config
    "RenameConfig",
    "HistoryConfig",
    "ScoringConfig",
    "SuggestionConfig",
    "StorageConfig",
    # Exceptions
    "LemonRenameError",
    "ConfigurationError",
    "HistoryError",
    "PersistenceError",
    "NoteFileError",
    "NoteParseError",
    "NoteNotFoundError",
]
