"""Tests for the suggestion engine."""

from datetime import datetime

import pytest

from lemon_rename.core.config import SuggestionConfig
from lemon_rename.core.constants import PatternType, SuggestionType
from lemon_rename.models.history import HistoricalPattern
from lemon_rename.models.note import NoteFile, NoteRef
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionStrategy
from lemon_rename.suggest.engine import (
    NoteIndex,
    SuggestionEngine,
    create_default_engine,
    merge_suggestions,
)

NOW = datetime(2024, 6, 15, 12, 0)


def smart(value: str, score: float, key: str = "test") -> RenameSuggestion:
    return RenameSuggestion(
        label=value,
        value=value,
        type=SuggestionType.SMART,
        score=score,
        icon="*",
        pattern_key=key,
    )


class FixedStrategy(SuggestionStrategy):
    """Returns a preset list of suggestions."""

    def __init__(self, name: str, priority: int, suggestions: list[RenameSuggestion]) -> None:
        super().__init__()
        self.name = name
        self.priority = priority
        self._suggestions = suggestions

    def generate(self, note, context):
        return list(self._suggestions)


class FailingStrategy(SuggestionStrategy):
    name = "Failing"
    priority = 50

    def generate(self, note, context):
        raise RuntimeError("boom")


class ListIndex:
    """In-memory note index."""

    def __init__(self, paths: list[str]) -> None:
        self._refs = [NoteRef(p) for p in paths]

    def list_notes(self) -> list[NoteRef]:
        return list(self._refs)


@pytest.fixture
def note() -> NoteFile:
    return NoteFile(path="Work/Untitled.md", content="# Report\n")


class TestMergeSuggestions:
    """Tests for dedup and ranking."""

    def test_keeps_highest_score(self) -> None:
        merged = merge_suggestions([smart("A", 60, "low"), smart("A", 80, "high")], "X")

        assert len(merged) == 1
        assert merged[0].score == 80
        assert merged[0].pattern_key == "high"

    def test_first_wins_on_tie(self) -> None:
        merged = merge_suggestions([smart("A", 70, "first"), smart("A", 70, "second")], "X")
        assert merged[0].pattern_key == "first"

    def test_drops_current_and_empty(self) -> None:
        merged = merge_suggestions([smart("X", 99), smart("  ", 98), smart("B", 10)], "X")
        assert [s.value for s in merged] == ["B"]

    def test_sorted_descending(self) -> None:
        merged = merge_suggestions([smart("A", 10), smart("B", 30), smart("C", 20)], "X")
        assert [s.value for s in merged] == ["B", "C", "A"]


class TestSuggestionEngine:
    """Tests for SuggestionEngine."""

    def test_register_orders_by_priority(self) -> None:
        engine = SuggestionEngine()
        engine.register_strategy(FixedStrategy("low", 10, []))
        engine.register_strategy(FixedStrategy("high", 90, []))
        engine.register_strategy(FixedStrategy("mid", 50, []))

        assert [s.name for s in engine.strategies] == ["high", "mid", "low"]

    def test_dedup_across_strategies(self, note: NoteFile) -> None:
        engine = SuggestionEngine()
        engine.register_strategy(FixedStrategy("one", 90, [smart("Same", 60), smart("Other", 40)]))
        engine.register_strategy(FixedStrategy("two", 80, [smart("Same", 85)]))

        suggestions = engine.generate_suggestions(note, now=NOW)

        assert [(s.value, s.score) for s in suggestions] == [("Same", 85), ("Other", 40)]

    def test_truncates(self, note: NoteFile) -> None:
        engine = SuggestionEngine()
        engine.register_strategy(
            FixedStrategy("many", 10, [smart(f"N{i}", float(i)) for i in range(20)])
        )

        assert len(engine.generate_suggestions(note, now=NOW)) == 10
        assert len(engine.generate_suggestions(note, max_suggestions=3, now=NOW)) == 3

    def test_configured_limit(self, note: NoteFile) -> None:
        engine = SuggestionEngine(config=SuggestionConfig(max_suggestions=2))
        engine.register_strategy(
            FixedStrategy("many", 10, [smart(f"N{i}", float(i)) for i in range(5)])
        )

        assert [s.value for s in engine.generate_suggestions(note, now=NOW)] == ["N4", "N3"]

    def test_failing_strategy_isolated(self, note: NoteFile) -> None:
        engine = SuggestionEngine()
        engine.register_strategy(FailingStrategy())
        engine.register_strategy(FixedStrategy("ok", 10, [smart("Fine", 50)]))

        suggestions = engine.generate_suggestions(note, now=NOW)

        assert [s.value for s in suggestions] == ["Fine"]
        stats = engine.get_stats()
        assert stats["strategies"]["Failing"]["failures"] == 1
        assert stats["strategies"]["ok"]["suggestions"] == 1

    def test_current_name_guard(self, note: NoteFile) -> None:
        engine = SuggestionEngine()
        engine.register_strategy(FixedStrategy("bad", 10, [smart("Untitled", 99)]))

        assert engine.generate_suggestions(note, now=NOW) == []

    def test_stats_reset(self, note: NoteFile) -> None:
        engine = SuggestionEngine()
        engine.register_strategy(FixedStrategy("ok", 10, [smart("Fine", 50)]))
        engine.generate_suggestions(note, now=NOW)

        assert engine.get_stats()["total_requests"] == 1
        engine.reset_stats()
        stats = engine.get_stats()
        assert stats["total_requests"] == 0
        assert stats["strategies"]["ok"]["invocations"] == 0


class TestBuildContext:
    """Tests for request context assembly."""

    def test_without_index(self, note: NoteFile) -> None:
        context = SuggestionEngine().build_context(note, now=NOW)

        assert context.current_filename == "Untitled"
        assert context.h1_title == "Report"
        assert context.existing_filenames == frozenset({"Untitled"})
        assert tuple(context.sibling_filenames) == ()
        assert context.now == NOW

    def test_with_index(self, note: NoteFile) -> None:
        index = ListIndex(["Work/Untitled.md", "Work/001-a.md", "Other/b.md", "c.md"])
        assert isinstance(index, NoteIndex)

        context = SuggestionEngine(index).build_context(note)

        assert context.existing_filenames == frozenset({"Untitled", "001-a", "b", "c"})
        assert tuple(context.sibling_filenames) == ("001-a",)

    def test_h2_only_has_no_h1(self) -> None:
        context = SuggestionEngine().build_context(NoteFile(path="n.md", content="## Sub\n"))
        assert context.h1_title is None


class TestDefaultEngine:
    """Tests for the fully wired engine."""

    def test_registers_all_strategies(self) -> None:
        engine = create_default_engine()

        priorities = [s.priority for s in engine.strategies]
        assert len(priorities) == 10
        assert priorities == sorted(priorities, reverse=True)
        assert engine.strategies[0].name == "H1 Title"
        assert engine.strategies[-1].name == "Keyword Extraction"

    def test_heading_ranks_first(self, note: NoteFile) -> None:
        note.tags = ["project"]
        patterns = [HistoricalPattern(PatternType.SUFFIX, "-v2", 5, 0, 0.8)]
        index = ListIndex(["Work/Untitled.md", "Work/Report-v1.md"])

        suggestions = create_default_engine(index).generate_suggestions(note, patterns, now=NOW)
        values = [s.value for s in suggestions]

        assert values[0] == "Report"
        assert suggestions[0].score == 100
        assert "Report-v2" in values
        assert "Untitled" not in values
        assert len(values) == len(set(values))
        assert len(values) <= 10

    def test_untitled_note_uses_keywords(self) -> None:
        note = NoteFile(path="scratch.md", content="kubernetes cluster kubernetes upgrade notes")

        suggestions = create_default_engine().generate_suggestions(note, now=NOW)

        assert [s.value for s in suggestions] == [
            "kubernetes_cluster_upgrade",
            "kubernetes-cluster",
            "kubernetes",
        ]
