"""
Rename history store.

Owns every observed rename and every accept/reject signal, persists them
as one JSON document, and mines them into scored prefix/suffix patterns.

Each mutating call is one logical transaction against the in-memory maps
followed by a full-document write. A failed write raises PersistenceError
and leaves the in-memory state as updated.
"""

import json
import logging
import os
import secrets
import tempfile
from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path
from threading import Lock
from types import MappingProxyType

from pydantic import ValidationError

from lemon_rename.core.config import RenameConfig
from lemon_rename.core.constants import (
    ICON_QUICK,
    ICON_SMART,
    MS_PER_DAY,
    SHORT_ID_ALPHABET,
    SHORT_ID_LENGTH,
    SuggestionType,
    get_lemon_root,
)
from lemon_rename.core.exceptions import PersistenceError
from lemon_rename.core.timeutil import now_ms
from lemon_rename.history.aggregation import compact, count_in_time_range, record_event
from lemon_rename.history.patterns import collect_pattern_sources, extract_patterns
from lemon_rename.history.schema import HistoryDocument
from lemon_rename.history.scoring import ScoringModel
from lemon_rename.models.history import (
    HistoricalPattern,
    RenamePattern,
    RenameRecord,
    SuggestionFeedback,
    make_record_key,
)
from lemon_rename.models.suggestion import RenameSuggestion, SuggestionStats
from lemon_rename.utils.filenames import sanitize_filename

logger = logging.getLogger(__name__)


def generate_short_id(length: int = SHORT_ID_LENGTH) -> str:
    """Generate a random lowercase base-36 id."""
    return "".join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(length))


class PatternStore:
    """Persistent rename history and suggestion feedback.

    Example:
        store = PatternStore.for_vault(vault_root)
        store.load()
        store.record_rename("Meeting", "Meeting-draft")
        patterns = store.get_historical_patterns()
    """

    def __init__(
        self,
        path: Path | None = None,
        config: RenameConfig | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        """
        Initialize the store.

        Args:
            path: History document path; None keeps the store in memory only
            config: Configuration, defaults if None
            clock: Source of "now" in epoch milliseconds
        """
        self._path = path
        self._config = config or RenameConfig()
        self._clock = clock
        self._scoring = ScoringModel(self._config.scoring)
        self._records: dict[str, RenameRecord] = {}
        self._feedback: dict[str, SuggestionFeedback] = {}
        self._lock = Lock()

    @classmethod
    def for_vault(
        cls,
        base_path: Path,
        config: RenameConfig | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> "PatternStore":
        """Create a store at the vault's configured history location."""
        config = config or RenameConfig()
        path = get_lemon_root(base_path) / config.storage.history_file
        return cls(path, config, clock)

    @property
    def path(self) -> Path | None:
        """History document path, None when in memory only."""
        return self._path

    @property
    def scoring(self) -> ScoringModel:
        """Scoring model used for history-backed suggestions."""
        return self._scoring

    @property
    def records(self) -> Mapping[str, RenameRecord]:
        """Read-only view of rename records keyed by ``old→new``."""
        return MappingProxyType(self._records)

    @property
    def feedback(self) -> Mapping[str, SuggestionFeedback]:
        """Read-only view of feedback keyed by pattern key."""
        return MappingProxyType(self._feedback)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """
        Load the history document and apply retention cleanup.

        A missing, unreadable or malformed document resets the store to
        empty maps.
        """
        records: dict[str, RenameRecord] = {}
        feedback: dict[str, SuggestionFeedback] = {}

        if self._path is not None and self._path.exists():
            try:
                raw = self._path.read_text(encoding="utf-8")
                document = HistoryDocument.model_validate(json.loads(raw))
                records, feedback = document.to_state()
            except (
                OSError,
                UnicodeDecodeError,
                json.JSONDecodeError,
                ValidationError,
                TypeError,
            ) as e:
                logger.warning(f"Resetting unreadable rename history at {self._path}: {e}")
                records, feedback = {}, {}

        with self._lock:
            self._records = records
            self._feedback = feedback

        removed = self.cleanup()
        logger.info(
            f"Loaded {len(self._records)} rename records and "
            f"{len(self._feedback)} feedback entries ({removed} expired)"
        )

    def save(self) -> None:
        """
        Write the full history document.

        Raises:
            PersistenceError: If the document cannot be written
        """
        if self._path is None:
            return

        with self._lock:
            document = HistoryDocument.from_state(self._records, self._feedback)
            data = json.dumps(document.to_json_dict(), ensure_ascii=False, indent=2)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=".history-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(data)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to write rename history: {e}")
            raise PersistenceError(
                f"Failed to write rename history: {e}",
                path=self._path,
            ) from e

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_rename(
        self,
        old_name: str,
        new_name: str,
        used_suggestion_key: str | None = None,
    ) -> RenameRecord:
        """
        Record a performed rename.

        Args:
            old_name: Basename before the rename
            new_name: Basename after the rename
            used_suggestion_key: Pattern key of the suggestion the user
                picked, counted as an acceptance

        Returns:
            The updated record

        Raises:
            PersistenceError: If the history cannot be written
        """
        now = self._clock()
        history = self._config.history

        with self._lock:
            key = make_record_key(old_name, new_name)
            record = self._records.get(key)
            if record is None:
                record = RenameRecord(old_name=old_name, new_name=new_name)
                self._records[key] = record

            record_event(record, now, history.recent_window_hours, history.retention_days)

            if used_suggestion_key:
                self._apply_feedback(used_suggestion_key, True, now)

            self._prune()

        logger.debug(f"Recorded rename {key!r}")
        self.save()
        return record

    def record_suggestion_rejection(self, pattern_key: str) -> SuggestionFeedback:
        """Record that a suggestion with ``pattern_key`` was dismissed."""
        return self.record_feedback(pattern_key, accepted=False)

    def record_feedback(self, pattern_key: str, accepted: bool) -> SuggestionFeedback:
        """
        Record an accept or reject signal for a pattern key.

        Raises:
            PersistenceError: If the history cannot be written
        """
        now = self._clock()
        with self._lock:
            feedback = self._apply_feedback(pattern_key, accepted, now)
        self.save()
        return feedback

    def _apply_feedback(self, pattern_key: str, accepted: bool, now: int) -> SuggestionFeedback:
        history = self._config.history
        feedback = self._feedback.get(pattern_key)
        if feedback is None:
            feedback = SuggestionFeedback(pattern_key=pattern_key)
            self._feedback[pattern_key] = feedback

        record_event(feedback, now, history.recent_window_hours, history.retention_days)
        if accepted:
            feedback.accepted += 1
        else:
            feedback.rejected += 1
        return feedback

    def _prune(self) -> None:
        """Evict least recently used records above the record limit."""
        overflow = len(self._records) - self._config.history.max_records
        if overflow <= 0:
            return

        by_age = sorted(self._records.values(), key=lambda r: r.last_used)
        for record in by_age[:overflow]:
            del self._records[record.key]
        logger.info(f"Pruned {overflow} least recently used rename records")

    def cleanup(self) -> int:
        """
        Apply retention to all state.

        Drops records whose last event is past the retention horizon, then
        folds expired raw timestamps and purges old day buckets in the
        remaining records and feedback.

        Returns:
            Number of records removed
        """
        now = self._clock()
        history = self._config.history
        cutoff = now - history.retention_days * MS_PER_DAY

        with self._lock:
            stale = [key for key, r in self._records.items() if r.last_used < cutoff]
            for key in stale:
                del self._records[key]

            for record in self._records.values():
                compact(record, now, history.recent_window_hours, history.retention_days)
            for feedback in self._feedback.values():
                compact(feedback, now, history.recent_window_hours, history.retention_days)

        return len(stale)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_feedback(self, pattern_key: str) -> SuggestionFeedback | None:
        """Return feedback recorded for a pattern key, if any."""
        return self._feedback.get(pattern_key)

    def get_count_in_time_range(self, record: RenameRecord, hours: float) -> int:
        """Count a record's events within the last ``hours`` hours."""
        with self._lock:
            return count_in_time_range(
                record, hours, self._clock(), self._config.history.recent_window_hours
            )

    def extract_patterns(self) -> list[RenamePattern]:
        """Mine merged prefix/suffix patterns from non-stale records."""
        with self._lock:
            return self._mine_patterns(self._clock())

    def _mine_patterns(self, now: int) -> list[RenamePattern]:
        # Caller holds the lock.
        history = self._config.history
        return extract_patterns(
            self._records.values(),
            now,
            history.pattern_window_days,
            history.recent_window_hours,
        )

    def get_historical_patterns(self) -> list[HistoricalPattern]:
        """
        Project mined patterns with their feedback acceptance rate.

        Patterns without feedback get the configured default rate.

        Returns:
            Patterns ordered by frequency, then recency
        """
        scoring = self._config.scoring
        projected: list[HistoricalPattern] = []

        with self._lock:
            patterns = self._mine_patterns(self._clock())
            mined = [(p, self._feedback.get(p.key)) for p in patterns]

        for pattern, feedback in mined:
            if feedback is None or feedback.total == 0:
                accept_rate = scoring.default_accept_rate
            else:
                accept_rate = max(scoring.min_accept_rate, feedback.accept_rate)

            projected.append(
                HistoricalPattern(
                    type=pattern.type,
                    value=pattern.value,
                    frequency=pattern.count,
                    last_used=pattern.last_used,
                    accept_rate=accept_rate,
                )
            )

        projected.sort(key=lambda p: (p.frequency, p.last_used), reverse=True)
        return projected

    def get_suggestions(
        self,
        current_name: str,
        max_suggestions: int | None = None,
    ) -> list[RenameSuggestion]:
        """
        Suggest names for ``current_name`` from history alone.

        Smart suggestions apply each mined pattern to the current name and
        are ordered by score; the four quick suggestions (date suffix, date
        prefix, timestamp suffix, random id suffix) always follow them.

        Args:
            current_name: Basename to rename
            max_suggestions: Result limit, config default if None

        Returns:
            Smart suggestions by descending score, then quick suggestions
        """
        if max_suggestions is None:
            max_suggestions = self._config.suggestions.max_quick_suggestions

        now = self._clock()
        window_days = self._config.history.pattern_window_days

        smart: list[RenameSuggestion] = []
        with self._lock:
            sources = collect_pattern_sources(self._records.values(), now, window_days)
            for pattern in self._mine_patterns(now):
                new_name = sanitize_filename(pattern.apply(current_name))
                if not new_name or new_name == current_name:
                    continue

                feedback = self._feedback.get(pattern.key)
                contributing = sources[pattern.key][1] if pattern.key in sources else []
                smart.append(
                    RenameSuggestion(
                        label=new_name,
                        value=new_name,
                        type=SuggestionType.SMART,
                        score=self._scoring.calculate_score(pattern, feedback, now),
                        icon=ICON_SMART,
                        pattern_key=pattern.key,
                        stats=self._pattern_stats(pattern, contributing, feedback, now),
                    )
                )

        smart.sort(key=lambda s: s.score, reverse=True)
        return (smart + self._quick_suggestions(current_name, now))[:max_suggestions]

    def _pattern_stats(
        self,
        pattern: RenamePattern,
        records: list[RenameRecord],
        feedback: SuggestionFeedback | None,
        now: int,
    ) -> SuggestionStats:
        window = self._config.history.recent_window_hours

        def count(hours: int) -> int:
            return sum(count_in_time_range(r, hours, now, window) for r in records)

        return SuggestionStats(
            usage_count=pattern.count,
            accept_rate=feedback.accept_rate if feedback else 0.0,
            last_24h=count(24),
            last_7d=count(7 * 24),
            last_30d=count(30 * 24),
        )

    def _quick_suggestions(self, current_name: str, now: int) -> list[RenameSuggestion]:
        today = datetime.fromtimestamp(now / 1000).strftime("%Y%m%d")
        names = [
            f"{current_name}-{today}",
            f"{today}-{current_name}",
            f"{current_name}-{now}",
            f"{current_name}-{generate_short_id()}",
        ]
        return [
            RenameSuggestion(
                label=name,
                value=name,
                type=SuggestionType.QUICK,
                score=0.0,
                icon=ICON_QUICK,
            )
            for name in names
        ]
