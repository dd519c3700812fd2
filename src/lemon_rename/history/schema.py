"""Persisted rename history document schema.

The document is ``{"records": {...}, "feedback": {...}}`` with camelCase
field names. Unknown keys are ignored and every collection defaults to
empty so older and newer documents both load.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lemon_rename.models.history import RenameRecord, SuggestionFeedback


class _PersistedModel(BaseModel):
    """Base for persisted models: camelCase on disk, snake_case accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class RenameRecordModel(_PersistedModel):
    """On-disk form of a RenameRecord."""

    old_name: str
    new_name: str
    recent_timestamps: list[int] = Field(default_factory=list)
    daily_count: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: RenameRecord) -> "RenameRecordModel":
        return cls(
            old_name=record.old_name,
            new_name=record.new_name,
            recent_timestamps=list(record.recent_timestamps),
            daily_count=dict(record.daily_count),
        )

    def to_record(self) -> RenameRecord:
        return RenameRecord(
            old_name=self.old_name,
            new_name=self.new_name,
            recent_timestamps=list(self.recent_timestamps),
            daily_count=dict(self.daily_count),
        )


class SuggestionFeedbackModel(_PersistedModel):
    """On-disk form of a SuggestionFeedback entry."""

    recent_timestamps: list[int] = Field(default_factory=list)
    daily_count: dict[str, int] = Field(default_factory=dict)
    accepted: int = 0
    rejected: int = 0

    @classmethod
    def from_feedback(cls, feedback: SuggestionFeedback) -> "SuggestionFeedbackModel":
        return cls(
            recent_timestamps=list(feedback.recent_timestamps),
            daily_count=dict(feedback.daily_count),
            accepted=feedback.accepted,
            rejected=feedback.rejected,
        )

    def to_feedback(self, pattern_key: str) -> SuggestionFeedback:
        return SuggestionFeedback(
            pattern_key=pattern_key,
            recent_timestamps=list(self.recent_timestamps),
            daily_count=dict(self.daily_count),
            accepted=self.accepted,
            rejected=self.rejected,
        )


class HistoryDocument(_PersistedModel):
    """Whole persisted history: rename records and suggestion feedback."""

    records: dict[str, RenameRecordModel] = Field(default_factory=dict)
    feedback: dict[str, SuggestionFeedbackModel] = Field(default_factory=dict)

    @classmethod
    def from_state(
        cls,
        records: dict[str, RenameRecord],
        feedback: dict[str, SuggestionFeedback],
    ) -> "HistoryDocument":
        """Build a document from in-memory maps."""
        return cls(
            records={key: RenameRecordModel.from_record(r) for key, r in records.items()},
            feedback={
                key: SuggestionFeedbackModel.from_feedback(f) for key, f in feedback.items()
            },
        )

    def to_state(self) -> tuple[dict[str, RenameRecord], dict[str, SuggestionFeedback]]:
        """Convert to in-memory maps, re-keying records by their names."""
        records: dict[str, RenameRecord] = {}
        for model in self.records.values():
            record = model.to_record()
            records[record.key] = record

        feedback = {key: model.to_feedback(key) for key, model in self.feedback.items()}
        return records, feedback

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with on-disk (camelCase) field names."""
        return self.model_dump(by_alias=True)
