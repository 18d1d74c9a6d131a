"""Builders shared by unit and API tests."""

import uuid

from fastapi.testclient import TestClient

from quiz_service.db.models import Answer, Question, Quiz
from quiz_service.schemas.quiz import AnswerSubmission, QuizSubmission


# ── Quiz definitions ──────────────────────────────────────────────────────────


def quiz_payload(
    title: str = "Python Basics",
    category: str = "Programming",
    difficulty: str = "beginner",
    questions: int = 3,
    answers_per_question: int = 4,
    correct_index: int = 0,
    is_active: bool = True,
) -> dict:
    """Wire-format quiz definition with one correct answer per question."""
    return {
        "title": title,
        "description": f"{title} quiz",
        "category": category,
        "difficulty": difficulty,
        "estimatedMinutes": 5,
        "isActive": is_active,
        "questions": [
            {
                "text": f"Question {q + 1} of {title}?",
                "explanation": f"Explanation {q + 1}",
                "order": q + 1,
                "answers": [
                    {"text": f"Option {a + 1}", "isCorrect": a == correct_index}
                    for a in range(answers_per_question)
                ],
            }
            for q in range(questions)
        ],
    }


def build_quiz(correct_flags: list[list[bool]], explanations: list[str | None] | None = None) -> Quiz:
    """Transient (never persisted) quiz; one inner list of flags per question."""
    questions = []
    for index, flags in enumerate(correct_flags):
        questions.append(
            Question(
                id=uuid.uuid4(),
                text=f"Question number {index + 1}: what is the right option here?",
                explanation=explanations[index] if explanations else f"Because {index + 1}",
                order=index + 1,
                position=index,
                answers=[
                    Answer(id=uuid.uuid4(), text=f"Option {a + 1}", is_correct=flag, position=a)
                    for a, flag in enumerate(flags)
                ],
            )
        )
    return Quiz(id=uuid.uuid4(), title="Transient quiz", is_active=True, questions=questions)


def standard_quiz(questions: int = 3) -> Quiz:
    """Every question has four options, the first one correct."""
    return build_quiz([[True, False, False, False] for _ in range(questions)])


# ── Answer picking ────────────────────────────────────────────────────────────


def correct_answer(question: Question) -> str:
    return str(next(a.id for a in question.answers if a.is_correct))


def wrong_answer(question: Question) -> str:
    return str(next(a.id for a in question.answers if not a.is_correct))


def submission(pairs: list[tuple[str, str]], time_spent_seconds: int | None = None) -> QuizSubmission:
    return QuizSubmission(
        answers=[AnswerSubmission(question_id=q, answer_id=a) for q, a in pairs],
        time_spent_seconds=time_spent_seconds,
    )


def answer_all(quiz: Quiz, correct: list[bool]) -> QuizSubmission:
    """Answer each question right or wrong according to *correct*."""
    return submission(
        [
            (str(q.id), correct_answer(q) if ok else wrong_answer(q))
            for q, ok in zip(quiz.questions, correct)
        ]
    )


# ── API helpers ───────────────────────────────────────────────────────────────


def register_and_login(client: TestClient) -> str:
    """Create a user and return their JWT token."""
    uid = uuid.uuid4().hex[:8]
    email = f"user_{uid}@ex.com"
    resp = client.post(
        "/api/users/register",
        json={"email": email, "username": f"user_{uid}", "password": "testpwd1"},
    )
    assert resp.status_code == 201, resp.text
    resp = client.post("/api/users/login", json={"email": email, "password": "testpwd1"})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
