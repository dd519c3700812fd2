"""Filename and markdown helpers."""

from lemon_rename.utils.filenames import normalize_for_comparison, sanitize_filename
from lemon_rename.utils.markdown import (
    extract_wikilinks,
    find_first_heading,
    find_h1_title,
    iter_lines_outside_code,
    strip_code_blocks,
)

__all__ = [
    "sanitize_filename",
    "normalize_for_comparison",
    "find_first_heading",
    "find_h1_title",
    "iter_lines_outside_code",
    "strip_code_blocks",
    "extract_wikilinks",
]
