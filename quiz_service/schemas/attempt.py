"""Attempt schemas."""

import uuid
from datetime import datetime

from quiz_service.schemas.common import CamelModel
from quiz_service.schemas.quiz import FeedbackLevel, QuestionResult


class AttemptSummary(CamelModel):
    """Attempt as listed in history views, without answers."""

    id: uuid.UUID
    user_id: str
    quiz_id: uuid.UUID
    quiz_title: str
    score: int
    total_questions: int
    percentage: int
    feedback_level: FeedbackLevel
    feedback_message: str
    time_spent_seconds: int | None = None
    created_at: datetime


class AttemptDetail(AttemptSummary):
    """Single attempt with per-question results for review."""

    answers: list[QuestionResult] = []


class AttemptListResponse(CamelModel):
    attempts: list[AttemptSummary]
    total: int
    page: int
    limit: int
    total_pages: int


class UserStats(CamelModel):
    total_attempts: int
    average_score: int
    best_score: int
    quizzes_completed: int
