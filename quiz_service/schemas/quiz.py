"""Quiz, submission and scoring schemas."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import Field

from quiz_service.schemas.common import CamelModel


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FeedbackLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"
    KEEP_PRACTICING = "keep_practicing"


# ── Authoring input (repository write path) ──────────────────────────────────


class AnswerCreate(CamelModel):
    """Answer option. ``id`` is kept when editing an existing answer."""

    id: uuid.UUID | None = None
    text: str = Field(min_length=1)
    is_correct: bool = False


class QuestionCreate(CamelModel):
    """Question definition.

    The answer count is not constrained here: the structural
    rules (>= 2 answers, exactly one correct) belong to ``QuizValidator`` so
    that they are reported with the question index.
    """

    id: uuid.UUID | None = None
    text: str = Field(min_length=1)
    explanation: str = ""
    order: int = Field(default=1, ge=1)
    answers: list[AnswerCreate] = []


class QuizCreate(CamelModel):
    """Full quiz definition handed to ``QuizRepository.create/update``."""

    title: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    category: str = Field(min_length=1)
    difficulty: Difficulty = Difficulty.BEGINNER
    estimated_minutes: int = Field(gt=0)
    is_active: bool = True
    questions: list[QuestionCreate] = []


# ── Public read models (correctness never exposed) ───────────────────────────


class PublicAnswer(CamelModel):
    id: uuid.UUID
    text: str


class PublicQuestion(CamelModel):
    id: uuid.UUID
    text: str
    order: int
    answers: list[PublicAnswer]


class PublicQuiz(CamelModel):
    """GET /api/quizzes/{id}: the quiz as a quiz taker sees it."""

    id: uuid.UUID
    title: str
    description: str
    category: str
    difficulty: Difficulty
    estimated_minutes: int
    questions: list[PublicQuestion]


class QuizSummary(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    category: str
    difficulty: Difficulty
    question_count: int
    estimated_minutes: int


class QuizListResponse(CamelModel):
    quizzes: list[QuizSummary]
    total: int


class CategoriesResponse(CamelModel):
    categories: list[str]


# ── Submission & scoring ─────────────────────────────────────────────────────


class AnswerSubmission(CamelModel):
    question_id: str
    answer_id: str


class QuizSubmission(CamelModel):
    """POST /api/quizzes/{id}/submit"""

    answers: list[AnswerSubmission] = Field(min_length=1)
    time_spent_seconds: int | None = Field(default=None, ge=0)


class QuestionResult(CamelModel):
    question_id: str
    selected_answer_id: str
    correct_answer_id: str
    is_correct: bool
    explanation: str


class ScoringResult(CamelModel):
    score: int
    total_questions: int
    percentage: int
    results: list[QuestionResult]


class Feedback(CamelModel):
    level: FeedbackLevel
    message: str


class QuizResult(CamelModel):
    """Response of a successful submission."""

    attempt_id: str
    quiz_id: str
    score: int
    total_questions: int
    percentage: int
    feedback: str
    feedback_level: FeedbackLevel
    results: list[QuestionResult]
    completed_at: datetime
