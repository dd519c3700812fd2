"""
Pattern scoring with time decay and acceptance weighting.

score = count * time_decay * accept_rate * scale

time_decay is a step function of days since last use (1.0 inside a week,
0.5 inside a month, 0.1 after). accept_rate comes from user feedback,
floored so a rarely accepted pattern is demoted rather than erased; a
pattern without feedback is fully trusted.
"""

from lemon_rename.core.config import ScoringConfig
from lemon_rename.core.timeutil import days_between, now_ms
from lemon_rename.models.history import RenamePattern, SuggestionFeedback


class ScoringModel:
    """Converts pattern frequency, recency and feedback into a score."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    @property
    def config(self) -> ScoringConfig:
        """Return the current configuration."""
        return self._config

    def time_decay(self, last_used: int, now: int) -> float:
        """Step decay factor for a pattern last used at ``last_used``."""
        days_since_use = days_between(last_used, now)
        if days_since_use < self._config.recent_days:
            return self._config.recent_decay
        if days_since_use < self._config.stale_days:
            return self._config.medium_decay
        return self._config.stale_decay

    def accept_rate(self, feedback: SuggestionFeedback | None) -> float:
        """Floored acceptance rate, 1.0 when there is no feedback."""
        if feedback is None or feedback.total == 0:
            return 1.0
        return max(self._config.min_accept_rate, feedback.accept_rate)

    def calculate_score(
        self,
        pattern: RenamePattern,
        feedback: SuggestionFeedback | None = None,
        now: int | None = None,
    ) -> float:
        """
        Score a pattern.

        Args:
            pattern: Mined pattern with count and last use
            feedback: Feedback recorded for the pattern's key, if any
            now: Reference time in epoch milliseconds

        Returns:
            Non-negative ranking score
        """
        if now is None:
            now = now_ms()
        return (
            pattern.count
            * self.time_decay(pattern.last_used, now)
            * self.accept_rate(feedback)
            * self._config.score_scale
        )
