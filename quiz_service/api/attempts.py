"""Attempt history and statistics routes (always scoped to the caller)."""

from fastapi import APIRouter, Depends, Query

from quiz_service.api.deps import get_attempt_store, get_current_user
from quiz_service.config import settings
from quiz_service.db.models import User
from quiz_service.schemas.attempt import AttemptDetail, AttemptListResponse, UserStats
from quiz_service.services.attempt_store import AttemptStore

router = APIRouter()


@router.get("/me", response_model=AttemptListResponse)
def list_my_attempts(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    current_user: User = Depends(get_current_user),
    attempts: AttemptStore = Depends(get_attempt_store),
):
    """The current user's attempts, newest first."""
    return attempts.find_by_user(str(current_user.id), page=page, limit=limit)


@router.get("/me/stats", response_model=UserStats)
def my_stats(
    current_user: User = Depends(get_current_user),
    attempts: AttemptStore = Depends(get_attempt_store),
):
    return attempts.stats(str(current_user.id))


@router.get("/me/{attempt_id}", response_model=AttemptDetail)
def get_my_attempt(
    attempt_id: str,
    current_user: User = Depends(get_current_user),
    attempts: AttemptStore = Depends(get_attempt_store),
):
    """Single attempt with per-question results for review."""
    return attempts.find_by_id(attempt_id, requesting_user_id=str(current_user.id))


@router.get("/quiz/{quiz_id}", response_model=AttemptListResponse)
def list_my_quiz_attempts(
    quiz_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    current_user: User = Depends(get_current_user),
    attempts: AttemptStore = Depends(get_attempt_store),
):
    return attempts.find_by_quiz(quiz_id, str(current_user.id), page=page, limit=limit)
