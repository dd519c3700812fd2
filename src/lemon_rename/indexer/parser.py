"""Note file parser: frontmatter metadata, body and outgoing links."""

import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from lemon_rename.core.exceptions import NoteParseError
from lemon_rename.models.note import NoteFile
from lemon_rename.utils.markdown import extract_wikilinks

TAG_SPLIT_RE = re.compile(r"[,\s]+")


class NoteParser:
    """Parser for markdown notes with optional YAML frontmatter."""

    def parse(self, path: Path, root: Path | None = None) -> NoteFile:
        """
        Parse a note file.

        Args:
            path: Absolute path of the note
            root: Vault root used to compute the relative path

        Returns:
            Parsed note; the content excludes the frontmatter block

        Raises:
            NoteParseError: If the file cannot be read or its frontmatter is invalid
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NoteParseError(f"Failed to read file: {e}", path=path, error_type="io") from e

        try:
            post = frontmatter.loads(text)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            raise NoteParseError(
                f"Failed to parse YAML frontmatter: {e}",
                path=path,
                error_type="yaml",
            ) from e

        metadata = dict(post.metadata)
        category = metadata.get("category") or metadata.get("type")

        return NoteFile(
            path=self._relative_path(path, root),
            content=post.content,
            frontmatter=metadata,
            tags=self._parse_tags(metadata.get("tags")),
            category=str(category).strip() if category else None,
            links=extract_wikilinks(post.content),
            created=self._parse_datetime(metadata.get("created")) or self._file_created(path),
        )

    def _relative_path(self, path: Path, root: Path | None) -> str:
        if root is not None:
            try:
                return path.resolve().relative_to(root.resolve()).as_posix()
            except ValueError:
                pass
        return path.name

    def _parse_tags(self, tags: Any) -> list[str]:
        """Parse tags field to list of strings without leading '#'."""
        if isinstance(tags, list):
            raw = [str(t) for t in tags if t]
        elif isinstance(tags, str):
            raw = TAG_SPLIT_RE.split(tags)
        else:
            return []
        return [t.strip().lstrip("#") for t in raw if t.strip().lstrip("#")]

    def _parse_datetime(self, value: Any) -> datetime | None:
        """Parse datetime from various formats."""
        if value is None:
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        if isinstance(value, str):
            for fmt in [
                "%Y-%m-%d",
                "%Y-%m-%dT%H:%M:%S",
                "%Y-%m-%dT%H:%M:%SZ",
                "%Y-%m-%d %H:%M:%S",
            ]:
                try:
                    return datetime.strptime(value, fmt)
                except ValueError:
                    continue
        return None

    def _file_created(self, path: Path) -> datetime | None:
        """Creation time from the filesystem, ctime where birth time is unknown."""
        try:
            stat = path.stat()
        except OSError:
            return None
        created = getattr(stat, "st_birthtime", None) or stat.st_ctime
        return datetime.fromtimestamp(created)
