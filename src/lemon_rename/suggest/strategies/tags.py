"""Frontmatter tag and category strategy."""

from lemon_rename.core.constants import ICON_BOOKMARK, ICON_FOLDER, ICON_OPEN_FOLDER, ICON_TAG
from lemon_rename.models.note import NoteFile
from lemon_rename.models.suggestion import RenameSuggestion
from lemon_rename.suggest.base import SuggestionContext, SuggestionStrategy


def clean_tags(tags: list[str]) -> list[str]:
    """Strip leading '#' and drop empty tags."""
    cleaned = [str(t).strip().lstrip("#") for t in tags]
    return [t for t in cleaned if t]


class TagDrivenStrategy(SuggestionStrategy):
    """
    Combines frontmatter tags (and category) with the heading.

    Templates, highest score first:
        [category]-tag1-Title   90 (only with a category or type)
        tag1_tag2_Title         85
        [tag1]-Title            80
        #tag1 Title             75
    """

    name = "Tag-Driven"
    priority = 95

    def generate(
        self,
        note: NoteFile,
        context: SuggestionContext,
    ) -> list[RenameSuggestion]:
        resolved = self.resolve_title(note, context)
        if resolved is None:
            return []
        title = resolved[0]

        tags = clean_tags(note.tags)
        if not tags:
            return []

        templates: list[tuple[str, str, float, str]] = []
        if note.category:
            templates.append(("category", f"[{note.category}]-{tags[0]}-{title}", 90, ICON_OPEN_FOLDER))
        templates.extend([
            ("joined", f"{'_'.join(tags[:2])}_{title}", 85, ICON_TAG),
            ("bracket", f"[{tags[0]}]-{title}", 80, ICON_FOLDER),
            ("hashtag", f"#{tags[0]} {title}", 75, ICON_BOOKMARK),
        ])

        suggestions: list[RenameSuggestion] = []
        for template, name, score, icon in templates:
            suggestion = self._suggest(name, score, icon, f"tag-driven:{template}", context)
            if suggestion:
                suggestions.append(suggestion)
        return suggestions
