"""FastAPI dependencies shared across routes."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from quiz_service.core.security import decode_access_token
from quiz_service.db.models import User
from quiz_service.db.session import get_db
from quiz_service.services.attempt_store import AttemptStore
from quiz_service.services.quiz_repository import QuizRepository, parse_id
from quiz_service.services.quiz_submission import QuizSubmissionService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Decode JWT and return the authenticated user, or 401."""
    payload = decode_access_token(token)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user_id = parse_id(payload.get("sub") or "")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload"
        )
    user = db.get(User, user_id)
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )
    return user


# ── Core collaborators, one set per request session ───────────────────────────


def get_quiz_repository(db: Session = Depends(get_db)) -> QuizRepository:
    return QuizRepository(db)


def get_attempt_store(
    quizzes: QuizRepository = Depends(get_quiz_repository),
) -> AttemptStore:
    return AttemptStore(quizzes.db, quizzes=quizzes)


def get_submission_service(
    quizzes: QuizRepository = Depends(get_quiz_repository),
    attempts: AttemptStore = Depends(get_attempt_store),
) -> QuizSubmissionService:
    return QuizSubmissionService(quizzes, attempts)
