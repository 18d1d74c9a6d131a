"""Shared pytest fixtures for quiz-service tests."""

import os

# Must be set before the app (and its settings) are imported.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quiz_service.db import models  # noqa: F401  (registers tables)
from quiz_service.db.session import Base, get_db
from quiz_service.main import app
from quiz_service.schemas.quiz import QuizCreate
from quiz_service.services.quiz_repository import QuizRepository

from helpers import quiz_payload


# Use an in-memory SQLite database for testing with static pool
SQLALCHEMY_TEST_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,  # Use StaticPool to keep connection alive
    echo=False,
)
TestSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="function")
def db():
    """Fresh schema and session for each test (services commit, so no rollback trick)."""
    Base.metadata.create_all(bind=engine)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session):
    """FastAPI test client with overridden DB dependency."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_quiz(db: Session):
    """Persist a quiz through the validating repository and return the ORM row."""

    def _make(**kwargs) -> models.Quiz:
        return QuizRepository(db).create(QuizCreate.model_validate(quiz_payload(**kwargs)))

    return _make
