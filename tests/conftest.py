"""Pytest configuration and fixtures for Lemon Rename tests."""

import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Generator

import pytest

from lemon_rename.core.config import RenameConfig
from lemon_rename.core.constants import MS_PER_DAY, MS_PER_HOUR
from lemon_rename.history.store import PatternStore
from lemon_rename.indexer.vault import Vault
from lemon_rename.models.note import NoteFile

# 2024-06-15T12:00:00Z
NOW_MS = 1718452800000


class FakeClock:
    """Settable epoch-millisecond clock."""

    def __init__(self, start: int = NOW_MS) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms

    def advance_hours(self, hours: float) -> None:
        self.advance(int(hours * MS_PER_HOUR))

    def advance_days(self, days: float) -> None:
        self.advance(int(days * MS_PER_DAY))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at NOW_MS."""
    return FakeClock()


@pytest.fixture
def now_dt() -> datetime:
    """Local reference time used by date-based strategies."""
    return datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def config() -> RenameConfig:
    """Create default configuration."""
    return RenameConfig()


@pytest.fixture
def memory_store(clock: FakeClock) -> PatternStore:
    """Pattern store that never touches disk."""
    return PatternStore(None, clock=clock)


@pytest.fixture
def history_path(temp_dir: Path) -> Path:
    """History document location inside a temp vault."""
    return temp_dir / ".lemon" / "rename-history.json"


@pytest.fixture
def disk_store(history_path: Path, clock: FakeClock) -> PatternStore:
    """Pattern store persisted under the temp vault."""
    return PatternStore(history_path, clock=clock)


@pytest.fixture
def report_note() -> NoteFile:
    """Note with an H1 heading in a nested folder."""
    return NoteFile(
        path="Work/Projects/Untitled.md",
        content="# Report\n\nQuarterly numbers.\n",
    )


@pytest.fixture
def vault_dir(temp_dir: Path) -> Path:
    """Small vault with notes, a hidden folder and frontmatter."""
    (temp_dir / "Work").mkdir()
    (temp_dir / "Journal").mkdir()
    (temp_dir / ".obsidian").mkdir()
    (temp_dir / ".lemon").mkdir()

    (temp_dir / "Untitled.md").write_text(
        """---
tags: [project, work]
category: notes
---

# Report

See [[Alpha]] and [[Alpha|again]] and [[Work/Beta]].
""",
        encoding="utf-8",
    )
    (temp_dir / "Alpha.md").write_text("# Alpha\n", encoding="utf-8")
    (temp_dir / "Work" / "Beta.md").write_text("# Beta\n", encoding="utf-8")
    (temp_dir / "Journal" / "today.md").write_text("Some notes\n", encoding="utf-8")
    (temp_dir / ".obsidian" / "workspace.md").write_text("hidden\n", encoding="utf-8")
    return temp_dir


@pytest.fixture
def vault(vault_dir: Path) -> Vault:
    """Vault over vault_dir."""
    return Vault(vault_dir)
