"""
Vault access: enumerates and loads the notes under a root directory.

Hidden directories (``.lemon``, ``.obsidian``, ``.git``...) are skipped.
"""

import logging
from pathlib import Path

from lemon_rename.core.constants import NOTE_FILE_EXTENSION
from lemon_rename.core.exceptions import NoteNotFoundError
from lemon_rename.indexer.parser import NoteParser
from lemon_rename.models.note import NoteFile, NoteRef

logger = logging.getLogger(__name__)


class Vault:
    """A directory of markdown notes."""

    def __init__(self, root: Path, parser: NoteParser | None = None) -> None:
        self._root = Path(root)
        self._parser = parser or NoteParser()

    @property
    def root(self) -> Path:
        return self._root

    def list_notes(self) -> list[NoteRef]:
        """All notes in the vault, sorted by path."""
        if not self._root.is_dir():
            return []

        refs: list[NoteRef] = []
        for path in self._root.rglob(f"*{NOTE_FILE_EXTENSION}"):
            relative = path.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            if path.is_file():
                refs.append(NoteRef(relative.as_posix()))

        refs.sort(key=lambda r: r.path)
        logger.debug(f"Found {len(refs)} notes under {self._root}")
        return refs

    def load(self, ref: NoteRef) -> NoteFile:
        """Parse a note of this vault."""
        return self._parser.parse(self._root / ref.path, self._root)

    def resolve(self, name_or_path: str) -> NoteRef:
        """
        Find a note by relative path or by basename.

        Raises:
            NoteNotFoundError: If no note matches
        """
        candidate = Path(name_or_path)
        if candidate.is_absolute():
            try:
                candidate = candidate.resolve().relative_to(self._root.resolve())
            except ValueError:
                raise NoteNotFoundError(
                    f"Note is outside the vault: {name_or_path}",
                    path=Path(name_or_path),
                )

        wanted = candidate.as_posix()
        if not wanted.endswith(NOTE_FILE_EXTENSION):
            wanted_file = wanted + NOTE_FILE_EXTENSION
        else:
            wanted_file = wanted

        notes = self.list_notes()
        for ref in notes:
            if ref.path == wanted_file:
                return ref
        for ref in notes:
            if ref.basename == wanted or ref.filename == wanted_file:
                return ref

        raise NoteNotFoundError(f"Note not found: {name_or_path}", path=Path(name_or_path))
