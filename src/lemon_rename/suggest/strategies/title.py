"""Heading-as-filename strategy."""

from lemon_rename.core.constants import ICON_DUPLICATE, ICON_TITLE
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import DuplicatePolicy, SuggestionContext, SuggestionStrategy

TITLE_BASE_SCORE = 100.0
TITLE_LEVEL_STEP = 5.0
TITLE_MIN_SCORE = 80.0


class H1TitleStrategy(SuggestionStrategy):
    """
    Proposes the note's heading as its filename.

    An H1 scores 100; each deeper heading level costs 5 points, down to 80.
    The score is halved when a note with that name already exists.
    """

    name = "H1 Title"
    priority = 100
    duplicate_policy = DuplicatePolicy.PENALIZE

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []

        title, level = resolved
        score = max(TITLE_BASE_SCORE - TITLE_LEVEL_STEP * (level - 1), TITLE_MIN_SCORE)

        suggestion = self._suggest(
            title,
            score,
            ICON_TITLE,
            "h1-title",
            context,
            duplicate_icon=ICON_DUPLICATE,
        )
        return [suggestion] if suggestion else []
