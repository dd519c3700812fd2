"""Folder-name strategy: combines the nearest folders with the heading."""

from lemon_rename.core.constants import ICON_FOLDER, ICON_OPEN_FOLDER
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy

MAX_FOLDER_SEGMENTS = 2


def relevant_folders(folder_path: str) -> list[str]:
    """The last two meaningful segments of a folder path."""
    segments = [s for s in folder_path.split("/") if s and s not in (".", "..")]
    return segments[-MAX_FOLDER_SEGMENTS:]


class FolderNameStrategy(SuggestionStrategy):
    """
    Proposes names built from the note's folders.

    For each of the one or two nearest folders ``f``:
    ``f-Title`` (80), ``[f]-Title`` (78) and ``Title-f`` (75).
    Notes at the vault root get nothing.
    """

    name = "Folder Name"
    priority = 82

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        folders = relevant_folders(note.folder)
        if not folders:
            return []

        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        suggestions: list[RenameSuggestion] = []
        for folder in folders:
            templates = (
                (f"{folder}-{title}", 80, ICON_FOLDER),
                (f"[{folder}]-{title}", 78, ICON_OPEN_FOLDER),
                (f"{title}-{folder}", 75, ICON_FOLDER),
            )
            for name, score, icon in templates:
                suggestion = self._suggest(
                    name, score, icon, f"folder-name:{folder}", context
                )
                if suggestion:
                    suggestions.append(suggestion)
        return suggestions
