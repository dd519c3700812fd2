"""
Base classes for rename suggestion strategies.

Provides the abstract interface and the shared context consumed by all
strategies. Each strategy is a stateless function of the note and the
context: it proposes zero or more candidate names, each with a score and
a provenance (pattern) key.

Duplicate handling:
- PENALIZE: a candidate that already exists is kept at half score
- EXCLUDE: a candidate that already exists is dropped
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from lemon_rename.core.config import SuggestionConfig
from lemon_rename.core.constants import SuggestionType
from lemon_rename.models.history import HistoricalPattern
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion, SuggestionStats
from lemon_rename.utils.filenames import sanitize_filename
from lemon_rename.utils.markdown import find_first_heading


class DuplicatePolicy(str, Enum):
    """How a strategy treats candidates that already exist."""

    PENALIZE = "penalize"
    EXCLUDE = "exclude"


DUPLICATE_PENALTY: float = 0.5


@dataclass(frozen=True)
class SuggestionContext:
    """
    Inputs shared by every strategy for one suggestion request.

    Attributes:
        current_filename: Basename of the note being renamed
        h1_title: First level-1 heading of the note, if any
        historical_patterns: Mined patterns with acceptance rates
        existing_filenames: Basenames of all known notes
        sibling_filenames: Basenames of other notes in the same folder
        now: Reference time for date-based names
    """

    current_filename: str
    h1_title: str | None = None
    historical_patterns: Sequence[HistoricalPattern] = ()
    existing_filenames: frozenset[str] = frozenset()
    sibling_filenames: Sequence[str] = ()
    now: datetime = field(default_factory=datetime.now)


class SuggestionStrategy(ABC):
    """
    Abstract base class for suggestion strategies.

    Subclasses set ``name``, ``priority`` and ``duplicate_policy`` and
    implement generate(). Use _suggest() to build candidates so that
    sanitizing, no-op detection and duplicate handling stay uniform.

    Example:
        class MyStrategy(SuggestionStrategy):
            name = "My Strategy"
            priority = 50

            def generate(self, note, context):
                suggestion = self._suggest("Name", 60, "*", "mine", context)
                return [suggestion] if suggestion else []
    """

    name: str = "strategy"
    priority: int = 0
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.EXCLUDE

    def __init__(self, config: SuggestionConfig | None = None) -> None:
        """
        Initialize the strategy.

        Args:
            config: Suggestion configuration, uses defaults if None
        """
        self._config = config or SuggestionConfig()

    @property
    def config(self) -> SuggestionConfig:
        """Return the current configuration."""
        return self._config

    @abstractmethod
    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        """
        Propose candidate names for a note.

        Args:
            note: The note being renamed
            context: Shared request context

        Returns:
            Candidate suggestions, possibly empty

        Note:
            Implementations must not mutate the note or the context.
        """
        ...

    def resolve_title(self, note: NoteFile, context: SuggestionContext) -> tuple[str, int] | None:
        """
        Sanitized title and heading level for title-based names.

        Uses the context's H1 when present, otherwise the first heading of
        any level outside code blocks.
        """
        if context.h1_title:
            found: tuple[str, int] | None = (context.h1_title, 1)
        else:
            found = find_first_heading(note.content)

        if found is None:
            return None

        title = sanitize_filename(found[0])
        if not title:
            return None
        return title, found[1]

    def _suggest(
        self,
        name: str,
        score: float,
        icon: str,
        pattern_key: str,
        context: SuggestionContext,
        cap: float | None = None,
        duplicate_icon: str | None = None,
        stats: SuggestionStats | None = None,
    ) -> RenameSuggestion | None:
        """
        Build a smart suggestion or None if the candidate is unusable.

        The name is sanitized; empty names and the unchanged current name
        are rejected. Existing names are halved or dropped according to
        the strategy's duplicate policy; ``cap`` is applied last.
        """
        value = sanitize_filename(name)
        if not value or value == context.current_filename:
            return None

        if value in context.existing_filenames:
            if self.duplicate_policy == DuplicatePolicy.EXCLUDE:
                return None
            score *= DUPLICATE_PENALTY
            icon = duplicate_icon or icon

        if cap is not None:
            score = min(score, cap)

        return RenameSuggestion(
            label=value,
            value=value,
            type=SuggestionType.SMART,
            score=score,
            icon=icon,
            pattern_key=pattern_key,
            stats=stats,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(priority={self.priority})"
