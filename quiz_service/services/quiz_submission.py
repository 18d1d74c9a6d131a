"""Submission pipeline: validate → score → classify → record."""

from __future__ import annotations

import logging

from quiz_service.core.exceptions import QuizInactive
from quiz_service.schemas.quiz import QuizResult, QuizSubmission
from quiz_service.services.attempt_store import AttemptStore
from quiz_service.services.feedback import FeedbackClassifier
from quiz_service.services.quiz_repository import QuizRepository
from quiz_service.services.scoring import ScoringEngine
from quiz_service.services.submission_validator import SubmissionValidator

logger = logging.getLogger(__name__)


class QuizSubmissionService:
    """Turns one submission into exactly one attempt, or into an error and no attempt."""

    def __init__(
        self,
        quizzes: QuizRepository,
        attempts: AttemptStore,
        validator: SubmissionValidator | None = None,
        engine: ScoringEngine | None = None,
        classifier: FeedbackClassifier | None = None,
    ):
        self.quizzes = quizzes
        self.attempts = attempts
        self.validator = validator or SubmissionValidator()
        self.engine = engine or ScoringEngine()
        self.classifier = classifier or FeedbackClassifier()

    def submit_quiz(self, quiz_id: str, user_id: str, submission: QuizSubmission) -> QuizResult:
        quiz = self.quizzes.get_by_id(quiz_id)

        if not quiz.is_active:
            raise QuizInactive(
                f'Quiz "{quiz.title}" is not accepting submissions', quizId=str(quiz.id)
            )

        self.validator.validate(quiz, submission)
        scoring = self.engine.score(quiz, submission)
        feedback = self.classifier.feedback(scoring.percentage)

        attempt = self.attempts.create(
            scoring,
            feedback,
            user_id=user_id,
            quiz_id=quiz.id,
            quiz_title=quiz.title,
            time_spent_seconds=submission.time_spent_seconds,
        )
        logger.info(
            "User %s scored %d%% (%s) on quiz %s",
            user_id, scoring.percentage, feedback.level.value, quiz.id,
        )

        return QuizResult(
            attempt_id=str(attempt.id),
            quiz_id=str(quiz.id),
            score=scoring.score,
            total_questions=scoring.total_questions,
            percentage=scoring.percentage,
            feedback=feedback.message,
            feedback_level=feedback.level,
            results=scoring.results,
            completed_at=attempt.created_at,
        )
