"""Tests for the note parser."""

from datetime import datetime
from pathlib import Path

import pytest

from lemon_rename.core.exceptions import NoteParseError
from lemon_rename.indexer.parser import NoteParser


@pytest.fixture
def parser() -> NoteParser:
    return NoteParser()


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestNoteParser:
    """Tests for NoteParser."""

    def test_parse_frontmatter(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(
            temp_dir / "Work" / "Draft.md",
            """---
tags: [project, "#work"]
category: notes
created: 2024-01-02
---

# Report

Links to [[Alpha]] and [[Folder/Beta|b]].
""",
        )

        note = parser.parse(path, temp_dir)

        assert note.path == "Work/Draft.md"
        assert note.basename == "Draft"
        assert note.folder_name == "Work"
        assert note.tags == ["project", "work"]
        assert note.category == "notes"
        assert note.created == datetime(2024, 1, 2)
        assert note.links == ["Alpha", "Beta"]
        assert "# Report" in note.content
        assert "category:" not in note.content

    def test_type_used_as_category(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(temp_dir / "n.md", "---\ntype: meeting\n---\nbody\n")
        assert parser.parse(path, temp_dir).category == "meeting"

    def test_tags_from_string(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(temp_dir / "n.md", "---\ntags: 'a, #b c'\n---\nbody\n")
        assert parser.parse(path, temp_dir).tags == ["a", "b", "c"]

    def test_no_frontmatter(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(temp_dir / "plain.md", "# Plain\n")

        note = parser.parse(path, temp_dir)

        assert note.tags == []
        assert note.category is None
        assert note.frontmatter == {}
        assert isinstance(note.created, datetime)

    def test_created_string_formats(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(temp_dir / "n.md", "---\ncreated: '2024-03-04 05:06:07'\n---\n")
        assert parser.parse(path, temp_dir).created == datetime(2024, 3, 4, 5, 6, 7)

    def test_invalid_yaml(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(temp_dir / "bad.md", "---\ntags: [unclosed\n---\nbody\n")

        with pytest.raises(NoteParseError) as exc_info:
            parser.parse(path, temp_dir)

        assert exc_info.value.error_type == "yaml"

    def test_missing_file(self, parser: NoteParser, temp_dir: Path) -> None:
        with pytest.raises(NoteParseError) as exc_info:
            parser.parse(temp_dir / "missing.md", temp_dir)

        assert exc_info.value.error_type == "io"

    def test_invalid_utf8(self, parser: NoteParser, temp_dir: Path) -> None:
        path = temp_dir / "Broken.md"
        path.write_bytes(b"# Title\n\xff\xfe body\n")

        with pytest.raises(NoteParseError) as exc_info:
            parser.parse(path, temp_dir)

        assert exc_info.value.error_type == "io"

    def test_outside_root_uses_filename(self, parser: NoteParser, temp_dir: Path) -> None:
        path = write(temp_dir / "a" / "n.md", "x")
        assert parser.parse(path, temp_dir / "b").path == "n.md"
