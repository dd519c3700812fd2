"""Markdown scanning helpers: headings, code fences and wikilinks."""

import re
from collections.abc import Iterator

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
CODE_FENCE = "```"
CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")
WIKILINK_RE = re.compile(r"\[\[([^\[\]|#^]*)(?:[#^][^\[\]|]*)?(?:\|[^\[\]]*)?\]\]")


def iter_lines_outside_code(content: str) -> Iterator[str]:
    """Yield lines that are not inside a fenced code block."""
    in_code_block = False
    for line in content.split("\n"):
        if line.strip().startswith(CODE_FENCE):
            in_code_block = not in_code_block
            continue
        if not in_code_block:
            yield line


def find_first_heading(content: str, max_level: int = 6) -> tuple[str, int] | None:
    """
    Find the first ATX heading outside code blocks.

    Args:
        content: Markdown body
        max_level: Deepest heading level to accept (1-6)

    Returns:
        (heading text, level) or None
    """
    for line in iter_lines_outside_code(content):
        match = HEADING_RE.match(line)
        if not match:
            continue
        level = len(match.group(1))
        text = match.group(2).strip()
        if level <= max_level and text:
            return text, level
    return None


def find_h1_title(content: str) -> str | None:
    """Return the first level-1 heading outside code blocks."""
    for line in iter_lines_outside_code(content):
        match = HEADING_RE.match(line)
        if match and len(match.group(1)) == 1:
            text = match.group(2).strip()
            if text:
                return text
    return None


def strip_code_blocks(content: str) -> str:
    """Remove fenced code blocks."""
    return CODE_BLOCK_RE.sub("", content)


def extract_wikilinks(content: str) -> list[str]:
    """
    Extract wikilink target basenames in document order.

    ``[[folder/Target#Heading|alias]]`` yields ``Target``. Links inside
    code blocks and links to the current note (``[[#Heading]]``) are
    skipped.
    """
    links: list[str] = []
    for match in WIKILINK_RE.finditer(strip_code_blocks(content)):
        target = match.group(1).strip()
        if not target:
            continue
        basename = target.rsplit("/", 1)[-1]
        if basename.endswith(".md"):
            basename = basename[:-3]
        if basename:
            links.append(basename)
    return links
