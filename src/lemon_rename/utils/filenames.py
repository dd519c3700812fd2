"""Filename safety helpers."""

import re

from lemon_rename.core.constants import INVALID_FILENAME_CHARS

INVALID_FILENAME_RE = re.compile(f"[{re.escape(INVALID_FILENAME_CHARS)}]")
WHITESPACE_RE = re.compile(r"\s+")


def sanitize_filename(name: str) -> str:
    """Strip characters invalid in filenames and collapse whitespace.

    Returns an empty string when nothing usable remains; callers drop
    empty candidates instead of inventing a placeholder.
    """
    cleaned = INVALID_FILENAME_RE.sub("", name.replace("\u0000", ""))
    return WHITESPACE_RE.sub(" ", cleaned).strip()


def normalize_for_comparison(name: str) -> str:
    """Lowercase a name and drop separators for fuzzy prefix matching."""
    return re.sub(r"[-_\s]", "", name.lower())
