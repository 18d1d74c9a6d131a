"""Structural checks run on a quiz before it is persisted.

Rules, per question and in question order:
  1. at least one answer must be flagged correct
  2. no more than one answer may be flagged correct
  3. at least two answer options

Quizzes read back from storage are assumed to satisfy these rules; this is
the only place they are enforced.
"""

from __future__ import annotations

import logging
from typing import Any

from quiz_service.core.exceptions import (
    MultipleCorrectAnswers,
    NoCorrectAnswer,
    TooFewAnswers,
)

logger = logging.getLogger(__name__)

MIN_ANSWERS = 2
EXCERPT_LENGTH = 30


def _excerpt(text: str) -> str:
    return text[:EXCERPT_LENGTH]


class QuizValidator:
    """Validates ORM quizzes or ``QuizCreate`` payloads alike (duck-typed)."""

    def validate(self, quiz: Any) -> None:
        for index, question in enumerate(quiz.questions, start=1):
            self.validate_question(question, index)

    def validate_question(self, question: Any, index: int) -> None:
        excerpt = _excerpt(question.text)
        correct = sum(1 for answer in question.answers if answer.is_correct)

        if correct == 0:
            logger.warning("Quiz rejected: question %d has no correct answer", index)
            raise NoCorrectAnswer(
                f'Question {index} ("{excerpt}...") must have at least one correct answer',
                question_index=index,
                question_excerpt=excerpt,
            )

        if correct > 1:
            logger.warning(
                "Quiz rejected: question %d has %d correct answers", index, correct
            )
            raise MultipleCorrectAnswers(
                f'Question {index} ("{excerpt}...") has multiple correct answers. '
                "Only one is allowed.",
                question_index=index,
                question_excerpt=excerpt,
            )

        if len(question.answers) < MIN_ANSWERS:
            logger.warning("Quiz rejected: question %d has too few answers", index)
            raise TooFewAnswers(
                f'Question {index} ("{excerpt}...") must have at least '
                f"{MIN_ANSWERS} answer options",
                question_index=index,
                question_excerpt=excerpt,
            )
