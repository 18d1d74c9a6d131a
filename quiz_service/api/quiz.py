"""Quiz catalogue and submission routes."""

from fastapi import APIRouter, Depends, Query

from quiz_service.api.deps import (
    get_current_user,
    get_quiz_repository,
    get_submission_service,
)
from quiz_service.config import settings
from quiz_service.db.models import User
from quiz_service.schemas.quiz import (
    CategoriesResponse,
    Difficulty,
    PublicQuiz,
    QuizListResponse,
    QuizResult,
    QuizSubmission,
    QuizSummary,
)
from quiz_service.services.quiz_repository import QuizRepository
from quiz_service.services.quiz_submission import QuizSubmissionService

router = APIRouter()


@router.get("", response_model=QuizListResponse)
def list_quizzes(
    category: str | None = None,
    difficulty: Difficulty | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    quizzes: QuizRepository = Depends(get_quiz_repository),
):
    """Active quizzes, newest first, optionally filtered."""
    items, total = quizzes.list(
        category=category,
        difficulty=difficulty.value if difficulty else None,
        page=page,
        limit=limit,
    )
    return QuizListResponse(
        quizzes=[QuizSummary.model_validate(q) for q in items], total=total
    )


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(quizzes: QuizRepository = Depends(get_quiz_repository)):
    return CategoriesResponse(categories=quizzes.distinct_categories())


@router.get("/{quiz_id}", response_model=PublicQuiz)
def get_quiz(quiz_id: str, quizzes: QuizRepository = Depends(get_quiz_repository)):
    """Quiz with its questions and answer options. Correctness is never included."""
    return PublicQuiz.model_validate(quizzes.get_public(quiz_id))


@router.post("/{quiz_id}/submit", response_model=QuizResult)
def submit_quiz(
    quiz_id: str,
    body: QuizSubmission,
    current_user: User = Depends(get_current_user),
    service: QuizSubmissionService = Depends(get_submission_service),
):
    """Score a full set of answers and record the attempt."""
    return service.submit_quiz(quiz_id, str(current_user.id), body)
