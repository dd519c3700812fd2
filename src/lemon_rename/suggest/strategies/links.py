"""Outgoing-link strategy."""

from lemon_rename.core.constants import ICON_LINK
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy

MAX_LINKED_NOTES = 3
REPEATED_LINK_BONUS = 5.0


class LinkRelationshipStrategy(SuggestionStrategy):
    """
    Combines the heading with the notes this note links to most.

    Only links that resolve to an existing note count. For each of the
    three most linked notes ``L``: ``L-Title`` (78) and ``Title-L`` (75),
    plus 5 when ``L`` is linked more than once.
    """

    name = "Link Relationship"
    priority = 83

    def top_links(self, note: NoteFile, context: SuggestionContext) -> list[tuple[str, int]]:
        """Most linked existing notes with their counts, ties in link order."""
        counts: dict[str, int] = {}
        for link in note.links:
            if link == context.current_filename or link not in context.existing_filenames:
                continue
            counts[link] = counts.get(link, 0) + 1

        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return ranked[:MAX_LINKED_NOTES]

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        links = self.top_links(note, context)
        if not links:
            return []

        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        suggestions: list[RenameSuggestion] = []
        for link, count in links:
            bonus = REPEATED_LINK_BONUS if count > 1 else 0.0
            for name, score in ((f"{link}-{title}", 78.0), (f"{title}-{link}", 75.0)):
                suggestion = self._suggest(
                    name, score + bonus, ICON_LINK, f"link-relationship:{link}", context
                )
                if suggestion:
                    suggestions.append(suggestion)
        return suggestions
