"""Scoring of validated multiple-choice submissions.

Each question is graded by answer *identity*: the selected answer id must be
the id of the answer flagged correct. Answer text is never compared.

Results follow the quiz's question order, not the submission's, so the same
question-to-answer mapping always produces the same output.
"""

from __future__ import annotations

import logging
from typing import Any

from quiz_service.core.exceptions import PreconditionFailed
from quiz_service.schemas.quiz import QuestionResult, ScoringResult

logger = logging.getLogger(__name__)


# ── Rounding helper ──────────────────────────────────────────────────────────


def round_ratio(numerator: int, denominator: int, scale: int = 1) -> int:
    """Return ``round(numerator / denominator * scale)`` with halves rounded up.

    Integer arithmetic only, so 1/8 → 12.5% → 13 exactly. Python's ``round``
    would give 12 (banker's rounding). An empty denominator yields 0.
    """
    if denominator <= 0:
        return 0
    return (2 * numerator * scale + denominator) // (2 * denominator)


def percentage_of(correct: int, total: int) -> int:
    """2/3 → 67, 1/3 → 33, 3/3 → 100, 0/4 → 0."""
    return round_ratio(correct, total, scale=100)


# ── Engine ───────────────────────────────────────────────────────────────────


class ScoringEngine:
    """Stateless scorer. Call only after ``SubmissionValidator`` accepted the input."""

    def score(self, quiz: Any, submission: Any) -> ScoringResult:
        selections = {entry.question_id: entry.answer_id for entry in submission.answers}

        correct_count = 0
        results: list[QuestionResult] = []

        for question in quiz.questions:
            question_id = str(question.id)

            selected_id = selections.get(question_id)
            if selected_id is None:
                raise PreconditionFailed(
                    f"No answer submitted for question {question_id}",
                    questionId=question_id,
                )

            answers = {str(a.id): a for a in question.answers}
            if selected_id not in answers:
                raise PreconditionFailed(
                    f"Answer {selected_id} does not belong to question {question_id}",
                    questionId=question_id,
                    answerId=selected_id,
                )

            correct_answer = next((a for a in question.answers if a.is_correct), None)
            if correct_answer is None:
                raise PreconditionFailed(
                    f"Question {question_id} has no correct answer",
                    questionId=question_id,
                )

            correct_id = str(correct_answer.id)
            is_correct = selected_id == correct_id
            if is_correct:
                correct_count += 1

            results.append(
                QuestionResult(
                    question_id=question_id,
                    selected_answer_id=selected_id,
                    correct_answer_id=correct_id,
                    is_correct=is_correct,
                    explanation=question.explanation or "",
                )
            )

        total = len(quiz.questions)
        percentage = percentage_of(correct_count, total)
        logger.debug("Scored quiz %s: %d/%d (%d%%)", quiz.id, correct_count, total, percentage)

        return ScoringResult(
            score=correct_count,
            total_questions=total,
            percentage=percentage,
            results=results,
        )
