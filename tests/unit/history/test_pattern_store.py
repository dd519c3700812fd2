"""Tests for the persistent pattern store."""

import json
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

from lemon_rename.core.config import HistoryConfig, RenameConfig
from lemon_rename.core.constants import MS_PER_DAY, SuggestionType
from lemon_rename.core.exceptions import PersistenceError
from lemon_rename.history.store import PatternStore, generate_short_id


class TestGenerateShortId:
    """Tests for generate_short_id."""

    def test_format(self) -> None:
        short_id = generate_short_id()
        assert len(short_id) == 8
        assert short_id.isalnum()
        assert short_id == short_id.lower()


class TestRecordRename:
    """Tests for recording renames."""

    def test_creates_and_updates_record(self, memory_store: PatternStore, clock) -> None:
        memory_store.record_rename("Meeting", "Meeting-draft")
        clock.advance_hours(1)
        record = memory_store.record_rename("Meeting", "Meeting-draft")

        assert list(memory_store.records) == ["Meeting→Meeting-draft"]
        assert record.total_count == 2
        assert record.last_used == clock.now

    def test_lru_bound_evicts_oldest(self, memory_store: PatternStore, clock) -> None:
        """Recording 1001 pairs keeps 1000, dropping the earliest."""
        for i in range(1001):
            memory_store.record_rename(f"note{i}", f"note{i}-x")
            clock.advance(1000)

        assert len(memory_store.records) == 1000
        assert "note0→note0-x" not in memory_store.records
        assert "note1→note1-x" in memory_store.records
        assert "note1000→note1000-x" in memory_store.records

    def test_lru_bound_with_small_limit(self, clock) -> None:
        config = RenameConfig(history=HistoryConfig(max_records=3))
        store = PatternStore(None, config, clock=clock)

        for name in ["a", "b", "c", "d", "e"]:
            store.record_rename(name, f"{name}-1")
            assert len(store.records) <= 3
            clock.advance(1000)

        assert sorted(store.records) == ["c→c-1", "d→d-1", "e→e-1"]

    def test_used_suggestion_counts_as_acceptance(self, memory_store: PatternStore) -> None:
        memory_store.record_rename("A", "A-v2", used_suggestion_key="suffix:-v2")

        feedback = memory_store.get_feedback("suffix:-v2")
        assert feedback is not None
        assert feedback.accepted == 1
        assert feedback.rejected == 0


class TestFeedback:
    """Tests for accept/reject signals."""

    def test_rejection(self, memory_store: PatternStore) -> None:
        memory_store.record_feedback("suffix:-draft", accepted=True)
        feedback = memory_store.record_suggestion_rejection("suffix:-draft")

        assert feedback.accepted == 1
        assert feedback.rejected == 1
        assert feedback.accept_rate == 0.5

    def test_unknown_key(self, memory_store: PatternStore) -> None:
        assert memory_store.get_feedback("suffix:-none") is None

    def test_historical_accept_rate(self, memory_store: PatternStore) -> None:
        memory_store.record_rename("A", "A-draft")
        memory_store.record_rename("B", "[Work]B")
        memory_store.record_feedback("prefix:[Work]", accepted=True)

        rates = {p.key: p.accept_rate for p in memory_store.get_historical_patterns()}

        assert rates == {"suffix:-draft": 0.5, "prefix:[Work]": 1.0}

    def test_historical_patterns_ordered_by_frequency(
        self, memory_store: PatternStore, clock
    ) -> None:
        memory_store.record_rename("A", "A-draft")
        memory_store.record_rename("B", "B-final")
        memory_store.record_rename("C", "C-final")

        patterns = memory_store.get_historical_patterns()

        assert [p.value for p in patterns] == ["-final", "-draft"]
        assert patterns[0].frequency == 2


class TestGetSuggestions:
    """Tests for history-only suggestions."""

    def test_empty_history_gives_quick_suggestions(
        self, memory_store: PatternStore, clock
    ) -> None:
        suggestions = memory_store.get_suggestions("Notes")
        today = datetime.fromtimestamp(clock.now / 1000).strftime("%Y%m%d")

        assert len(suggestions) == 4
        assert all(s.type == SuggestionType.QUICK for s in suggestions)
        assert all(s.score == 0 for s in suggestions)
        assert suggestions[0].value == f"Notes-{today}"
        assert suggestions[1].value == f"{today}-Notes"
        assert suggestions[2].value == f"Notes-{clock.now}"
        assert suggestions[3].value.startswith("Notes-")
        assert len(suggestions[3].value) == len("Notes-") + 8

    def test_smart_before_quick(self, memory_store: PatternStore) -> None:
        memory_store.record_rename("Meeting", "Meeting-draft")
        memory_store.record_rename("Plan", "Plan-draft")

        suggestions = memory_store.get_suggestions("Report")

        assert len(suggestions) == 5
        smart = suggestions[0]
        assert smart.value == "Report-draft"
        assert smart.type == SuggestionType.SMART
        assert smart.score == pytest.approx(20.0)
        assert smart.pattern_key == "suffix:-draft"
        assert smart.stats is not None
        assert smart.stats.usage_count == 2
        assert smart.stats.last_24h == 2
        assert all(s.type == SuggestionType.QUICK for s in suggestions[1:])

    def test_smart_sorted_by_score(self, memory_store: PatternStore, clock) -> None:
        memory_store.record_rename("A", "A-old")
        clock.advance_days(40)
        memory_store.record_rename("B", "B-new")

        values = [s.value for s in memory_store.get_suggestions("X") if s.is_smart]

        assert values == ["X-new", "X-old"]

    def test_truncation(self, memory_store: PatternStore) -> None:
        memory_store.record_rename("A", "A-draft")
        assert len(memory_store.get_suggestions("Notes", max_suggestions=2)) == 2


class TestPersistence:
    """Tests for load/save of the history document."""

    def test_round_trip(self, disk_store: PatternStore, history_path: Path, clock) -> None:
        disk_store.record_rename("Meeting", "Meeting-draft", used_suggestion_key="suffix:-draft")

        reloaded = PatternStore(history_path, clock=clock)
        reloaded.load()

        assert list(reloaded.records) == ["Meeting→Meeting-draft"]
        assert reloaded.records["Meeting→Meeting-draft"].recent_timestamps == [clock.now]
        assert reloaded.get_feedback("suffix:-draft").accepted == 1

    def test_document_uses_camel_case(self, disk_store: PatternStore, history_path: Path) -> None:
        disk_store.record_rename("Meeting", "Meeting-draft")

        data = json.loads(history_path.read_text(encoding="utf-8"))
        record = data["records"]["Meeting→Meeting-draft"]

        assert record["oldName"] == "Meeting"
        assert record["newName"] == "Meeting-draft"
        assert "recentTimestamps" in record
        assert "dailyCount" in record
        assert data["feedback"] == {}

    def test_unknown_and_missing_keys(self, history_path: Path, clock) -> None:
        history_path.parent.mkdir(parents=True)
        history_path.write_text(
            json.dumps({
                "version": 3,
                "records": {
                    "A→A-x": {"oldName": "A", "newName": "A-x", "recentTimestamps": [clock.now], "extra": 1},
                },
            }),
            encoding="utf-8",
        )

        store = PatternStore(history_path, clock=clock)
        store.load()

        assert list(store.records) == ["A→A-x"]
        assert dict(store.feedback) == {}

    def test_corrupt_document_resets(self, history_path: Path, clock) -> None:
        history_path.parent.mkdir(parents=True)
        history_path.write_text("{not json", encoding="utf-8")

        store = PatternStore(history_path, clock=clock)
        store.load()

        assert len(store.records) == 0
        assert len(store.feedback) == 0

    def test_invalid_utf8_document_resets(self, history_path: Path, clock) -> None:
        history_path.parent.mkdir(parents=True)
        history_path.write_bytes(b'{"records": {"\xff\xfe": 1}}')

        store = PatternStore(history_path, clock=clock)
        store.load()

        assert len(store.records) == 0
        assert len(store.feedback) == 0

    def test_missing_document(self, disk_store: PatternStore) -> None:
        disk_store.load()
        assert len(disk_store.records) == 0

    def test_write_failure_raises(self, temp_dir: Path, clock) -> None:
        blocker = temp_dir / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = PatternStore(blocker / "history.json", clock=clock)

        with pytest.raises(PersistenceError):
            store.record_rename("A", "A-x")

        assert "A→A-x" in store.records

    def test_for_vault_path(self, temp_dir: Path) -> None:
        store = PatternStore.for_vault(temp_dir)
        assert store.path == temp_dir / ".lemon" / "rename-history.json"


class TestCleanup:
    """Tests for retention cleanup."""

    def test_removes_expired_records(self, memory_store: PatternStore, clock) -> None:
        memory_store.record_rename("A", "A-x")
        clock.advance_days(400)
        memory_store.record_rename("B", "B-x")

        removed = memory_store.cleanup()

        assert removed == 1
        assert list(memory_store.records) == ["B→B-x"]

    def test_no_bucket_older_than_retention(self, memory_store: PatternStore, clock) -> None:
        memory_store.record_rename("A", "A-x")
        clock.advance_days(200)
        memory_store.record_rename("A", "A-x")
        clock.advance_days(200)
        memory_store.record_rename("A", "A-x")

        memory_store.cleanup()

        record = memory_store.records["A→A-x"]
        horizon = datetime.fromtimestamp((clock.now - 365 * MS_PER_DAY) / 1000, tz=timezone.utc)
        assert all(day >= horizon.strftime("%Y-%m-%d") for day in record.daily_count)
        assert record.total_count == 2

    def test_load_applies_cleanup(self, disk_store: PatternStore, history_path: Path, clock) -> None:
        disk_store.record_rename("A", "A-x")
        clock.advance_days(400)

        reloaded = PatternStore(history_path, clock=clock)
        reloaded.load()

        assert len(reloaded.records) == 0


class TestConcurrency:
    """Tests for sharing one store between threads."""

    def test_queries_and_saves_during_eviction(self, history_path: Path, clock) -> None:
        config = RenameConfig(history=HistoryConfig(max_records=5))
        store = PatternStore(history_path, config, clock=clock)
        errors: list[Exception] = []

        def record(worker: int) -> None:
            try:
                for i in range(100):
                    store.record_rename(f"w{worker}-{i}", f"w{worker}-{i}-draft")
            except Exception as e:
                errors.append(e)

        def query() -> None:
            try:
                for _ in range(100):
                    store.get_suggestions("Notes")
                    store.get_historical_patterns()
                    store.save()
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=record, args=(n,)) for n in range(3)]
        threads += [threading.Thread(target=query) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(store.records) <= 5

        reloaded = PatternStore(history_path, config, clock=clock)
        reloaded.load()
        assert len(reloaded.records) <= 5
