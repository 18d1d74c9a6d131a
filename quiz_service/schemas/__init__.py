"""Pydantic schemas — re‑exported for convenience."""

from quiz_service.schemas.common import CamelModel, ErrorResponse  # noqa: F401
from quiz_service.schemas.user import (  # noqa: F401
    AuthResponse,
    UserCreate,
    UserLogin,
    UserRead,
)
from quiz_service.schemas.quiz import (  # noqa: F401
    AnswerCreate,
    AnswerSubmission,
    CategoriesResponse,
    Difficulty,
    Feedback,
    FeedbackLevel,
    PublicQuiz,
    QuestionCreate,
    QuestionResult,
    QuizCreate,
    QuizListResponse,
    QuizResult,
    QuizSubmission,
    QuizSummary,
    ScoringResult,
)
from quiz_service.schemas.attempt import (  # noqa: F401
    AttemptDetail,
    AttemptListResponse,
    AttemptSummary,
    UserStats,
)
