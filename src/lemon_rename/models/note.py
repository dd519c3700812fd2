"""Note file data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from lemon_rename.core.constants import NOTE_FILE_EXTENSION


@dataclass(frozen=True)
class NoteRef:
    """Reference to a note by its vault-relative POSIX path."""

    path: str

    @property
    def filename(self) -> str:
        """Get the filename from path."""
        return self.path.rsplit("/", 1)[-1]

    @property
    def basename(self) -> str:
        """Filename without the markdown extension."""
        name = self.filename
        if name.endswith(NOTE_FILE_EXTENSION):
            return name[: -len(NOTE_FILE_EXTENSION)]
        return name

    @property
    def folder(self) -> str:
        """Parent folder path, empty for the vault root."""
        parts = self.path.rsplit("/", 1)
        return parts[0] if len(parts) > 1 else ""

    @property
    def folder_name(self) -> str:
        """Name of the parent folder, empty for the vault root."""
        return self.folder.rsplit("/", 1)[-1]


@dataclass
class NoteFile:
    """A parsed markdown note."""

    path: str
    content: str = ""
    frontmatter: dict[str, Any] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    category: str | None = None
    links: list[str] = field(default_factory=list)
    created: datetime | None = None

    @property
    def ref(self) -> NoteRef:
        """Lightweight reference to this note."""
        return NoteRef(self.path)

    @property
    def basename(self) -> str:
        """Filename without the markdown extension."""
        return self.ref.basename

    @property
    def folder(self) -> str:
        """Parent folder path, empty for the vault root."""
        return self.ref.folder

    @property
    def folder_name(self) -> str:
        """Name of the parent folder."""
        return self.ref.folder_name
