"""Append-only attempt log with paginated history and per-user statistics."""

from __future__ import annotations

import logging
import math
import uuid
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from quiz_service.core.exceptions import AttemptNotFound, Forbidden, QuizNotFound
from quiz_service.db.models import AttemptAnswer, QuizAttempt
from quiz_service.schemas.attempt import (
    AttemptDetail,
    AttemptListResponse,
    AttemptSummary,
    UserStats,
)
from quiz_service.schemas.quiz import Feedback, QuestionResult, ScoringResult
from quiz_service.services.quiz_repository import QuizRepository, parse_id
from quiz_service.services.scoring import round_ratio

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AttemptStore:
    """Attempts are created once and never updated or deleted.

    ``quizzes`` is used only by ``find_by_id`` to join the live quiz content
    onto stored selections. ``clock`` stamps ``created_at``.
    """

    def __init__(
        self,
        db: Session,
        quizzes: QuizRepository | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.db = db
        self.quizzes = quizzes or QuizRepository(db)
        self.clock = clock

    # ── Write ────────────────────────────────────────────────────────────

    def create(
        self,
        scoring_result: ScoringResult,
        feedback: Feedback,
        user_id: str,
        quiz_id: str | uuid.UUID,
        quiz_title: str,
        time_spent_seconds: int | None = None,
    ) -> QuizAttempt:
        attempt = QuizAttempt(
            id=uuid.uuid4(),
            user_id=str(user_id),
            quiz_id=parse_id(quiz_id),
            quiz_title=quiz_title,
            score=scoring_result.score,
            total_questions=scoring_result.total_questions,
            percentage=scoring_result.percentage,
            feedback_level=feedback.level,
            feedback_message=feedback.message,
            time_spent_seconds=time_spent_seconds,
            created_at=self.clock(),
            answers=[
                AttemptAnswer(
                    question_id=r.question_id,
                    answer_id=r.selected_answer_id,
                    is_correct=r.is_correct,
                    position=position,
                )
                for position, r in enumerate(scoring_result.results)
            ],
        )
        # attempt row and answer rows land in a single commit
        self.db.add(attempt)
        self.db.commit()
        self.db.refresh(attempt)
        logger.info(
            "Recorded attempt %s user=%s quiz=%s score=%d/%d",
            attempt.id, attempt.user_id, attempt.quiz_id,
            attempt.score, attempt.total_questions,
        )
        return attempt

    # ── History ──────────────────────────────────────────────────────────

    def find_by_user(self, user_id: str, page: int = 1, limit: int = 10) -> AttemptListResponse:
        query = self.db.query(QuizAttempt).filter(QuizAttempt.user_id == str(user_id))
        return self._paginate(query, page, limit)

    def find_by_quiz(
        self, quiz_id: str | uuid.UUID, user_id: str, page: int = 1, limit: int = 10
    ) -> AttemptListResponse:
        qid = parse_id(quiz_id)
        if qid is None:
            return AttemptListResponse(
                attempts=[], total=0, page=page, limit=limit, total_pages=0
            )
        query = self.db.query(QuizAttempt).filter(
            QuizAttempt.user_id == str(user_id),
            QuizAttempt.quiz_id == qid,
        )
        return self._paginate(query, page, limit)

    def _paginate(self, query: Query, page: int, limit: int) -> AttemptListResponse:
        total = query.count()
        rows = (
            query.order_by(QuizAttempt.created_at.desc(), QuizAttempt.id)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        logger.debug("Attempt page %d (limit %d) → %d/%d", page, limit, len(rows), total)
        return AttemptListResponse(
            attempts=[AttemptSummary.model_validate(row) for row in rows],
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit) if limit else 0,
        )

    # ── Single attempt ───────────────────────────────────────────────────

    def get(self, attempt_id: str | uuid.UUID, requesting_user_id: str | None = None) -> QuizAttempt:
        """Raw stored attempt (selections only), with the ownership check."""
        aid = parse_id(attempt_id)
        attempt = self.db.get(QuizAttempt, aid) if aid is not None else None
        if attempt is None:
            raise AttemptNotFound(
                f'Attempt with ID "{attempt_id}" not found', attemptId=str(attempt_id)
            )
        if requesting_user_id is not None and attempt.user_id != str(requesting_user_id):
            logger.warning(
                "User %s denied access to attempt %s", requesting_user_id, attempt_id
            )
            raise Forbidden("You do not have permission to view this attempt")
        return attempt

    def find_by_id(
        self, attempt_id: str | uuid.UUID, requesting_user_id: str | None = None
    ) -> AttemptDetail:
        """Stored attempt with answers completed from the quiz as it is *now*.

        Correct answer and explanation are read from the live quiz, so edits
        made after the attempt show up here. ``isCorrect`` is the stored
        verdict. Questions that no longer exist get empty strings.
        """
        attempt = self.get(attempt_id, requesting_user_id)

        try:
            quiz = self.quizzes.get_by_id(attempt.quiz_id)
            questions = {str(q.id): q for q in quiz.questions}
        except QuizNotFound:
            questions = {}

        answers: list[QuestionResult] = []
        for stored in attempt.answers:
            question = questions.get(stored.question_id)
            correct = (
                next((a for a in question.answers if a.is_correct), None)
                if question is not None
                else None
            )
            answers.append(
                QuestionResult(
                    question_id=stored.question_id,
                    selected_answer_id=stored.answer_id,
                    correct_answer_id=str(correct.id) if correct is not None else "",
                    is_correct=stored.is_correct,
                    explanation=(question.explanation or "") if question is not None else "",
                )
            )

        summary = AttemptSummary.model_validate(attempt)
        return AttemptDetail(**summary.model_dump(), answers=answers)

    # ── Statistics ───────────────────────────────────────────────────────

    def stats(self, user_id: str) -> UserStats:
        total, percentage_sum, best, distinct_quizzes = (
            self.db.query(
                func.count(QuizAttempt.id),
                func.coalesce(func.sum(QuizAttempt.percentage), 0),
                func.coalesce(func.max(QuizAttempt.percentage), 0),
                func.count(func.distinct(QuizAttempt.quiz_id)),
            )
            .filter(QuizAttempt.user_id == str(user_id))
            .one()
        )
        return UserStats(
            total_attempts=total,
            average_score=round_ratio(int(percentage_sum), total),
            best_score=int(best),
            quizzes_completed=distinct_quizzes,
        )
