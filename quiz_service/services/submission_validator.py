"""Check a submission against the quiz it targets, before scoring."""

from __future__ import annotations

import logging
from typing import Any

from quiz_service.core.exceptions import (
    DuplicateAnswer,
    IncompleteSubmission,
    UnknownAnswer,
    UnknownQuestion,
)

logger = logging.getLogger(__name__)


class SubmissionValidator:
    """Pure check; safe to call any number of times.

    Entries are processed in input order. A repeated question id is reported
    as a duplicate even when that id is also unknown to the quiz.
    """

    def validate(self, quiz: Any, submission: Any) -> None:
        questions = {str(q.id): q for q in quiz.questions}
        seen: set[str] = set()

        for entry in submission.answers:
            if entry.question_id in seen:
                raise DuplicateAnswer(entry.question_id)
            seen.add(entry.question_id)

            question = questions.get(entry.question_id)
            if question is None:
                raise UnknownQuestion(entry.question_id)

            if not any(str(a.id) == entry.answer_id for a in question.answers):
                raise UnknownAnswer(entry.answer_id, entry.question_id)

        if len(submission.answers) != len(quiz.questions):
            raise IncompleteSubmission(
                expected=len(quiz.questions), got=len(submission.answers)
            )

        logger.debug(
            "Submission for quiz %s passed validation (%d answers)",
            quiz.id,
            len(submission.answers),
        )
