"""
Rename history module.

Records performed renames and suggestion feedback, aggregates event
timestamps into rolling daily buckets, mines prefix/suffix patterns and
scores them with time decay and acceptance weighting.
"""

from lemon_rename.history.aggregation import (
    compact,
    count_in_time_range,
    fold_expired,
    purge_daily,
    record_event,
)
from lemon_rename.history.patterns import detect_pattern, extract_patterns
from lemon_rename.history.schema import HistoryDocument
from lemon_rename.history.scoring import ScoringModel
from lemon_rename.history.store import PatternStore

__all__ = [
    # Aggregation
    "record_event",
    "fold_expired",
    "purge_daily",
    "compact",
    "count_in_time_range",
    # Patterns
    "detect_pattern",
    "extract_patterns",
    # Scoring
    "ScoringModel",
    # Store
    "PatternStore",
    "HistoryDocument",
]
