"""Feedback tiers and encouragement messages for a scored attempt."""

from __future__ import annotations

import random

from quiz_service.schemas.quiz import Feedback, FeedbackLevel

# Evaluated high to low; first match wins.
FEEDBACK_THRESHOLDS: list[tuple[int, FeedbackLevel]] = [
    (90, FeedbackLevel.EXCELLENT),
    (70, FeedbackLevel.GOOD),
    (50, FeedbackLevel.NEEDS_IMPROVEMENT),
]

FEEDBACK_MESSAGES: dict[FeedbackLevel, tuple[str, str, str]] = {
    FeedbackLevel.EXCELLENT: (
        "Outstanding! You have mastered this topic!",
        "Excellent work! You truly understand this material.",
        "Brilliant! You aced this quiz!",
    ),
    FeedbackLevel.GOOD: (
        "Great job! You have a solid understanding.",
        "Well done! Keep building on this foundation.",
        "Nice work! You are on the right track.",
    ),
    FeedbackLevel.NEEDS_IMPROVEMENT: (
        "Good effort! Review the explanations to improve.",
        "You are getting there! Focus on the areas you missed.",
        "Keep practicing! You are making progress.",
    ),
    FeedbackLevel.KEEP_PRACTICING: (
        "Keep studying! Review the material and try again.",
        "Do not give up! Learning takes time and practice.",
        "Consider reviewing the fundamentals before retrying.",
    ),
}


class FeedbackClassifier:
    """Maps a percentage to a level; the message is drawn from that level's pool.

    Only the level is reproducible. Pass a seeded ``random.Random`` to make
    the message deterministic as well.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def classify(self, percentage: int) -> FeedbackLevel:
        for threshold, level in FEEDBACK_THRESHOLDS:
            if percentage >= threshold:
                return level
        return FeedbackLevel.KEEP_PRACTICING

    def message(self, percentage: int, level: FeedbackLevel) -> str:
        return self._rng.choice(FEEDBACK_MESSAGES[level])

    def feedback(self, percentage: int) -> Feedback:
        level = self.classify(percentage)
        return Feedback(level=level, message=self.message(percentage, level))
