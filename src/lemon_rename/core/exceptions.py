"""Lemon Rename custom exception hierarchy."""

from pathlib import Path
from typing import Any


class LemonRenameError(Exception):
    """Base exception for all Lemon Rename errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(LemonRenameError):
    """Raised when configuration is invalid."""

    pass


class HistoryError(LemonRenameError):
    """Base exception for rename history operations."""

    pass


class PersistenceError(HistoryError):
    """Raised when the history document cannot be written."""

    def __init__(
        self, message: str, path: Path | None = None, details: dict[str, Any] | None = None
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = path


class NoteFileError(LemonRenameError):
    """Base exception for note file operations."""

    def __init__(
        self, message: str, path: Path | None = None, details: dict[str, Any] | None = None
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = path


class NoteParseError(NoteFileError):
    """Raised when a note file cannot be read or its frontmatter parsed."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        error_type: str = "parse",
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["error_type"] = error_type
        super().__init__(message, path, details)
        self.error_type = error_type


class NoteNotFoundError(NoteFileError):
    """Raised when a note cannot be resolved inside a vault."""

    pass
