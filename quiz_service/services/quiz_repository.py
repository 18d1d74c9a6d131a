"""Quiz storage: lookups, listing and the validating write path."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quiz_service.core.exceptions import QuizNotFound
from quiz_service.db.models import Answer, Question, Quiz
from quiz_service.schemas.quiz import AnswerCreate, Difficulty, QuestionCreate, QuizCreate
from quiz_service.services.quiz_validator import QuizValidator

logger = logging.getLogger(__name__)


def parse_id(value: str | uuid.UUID) -> uuid.UUID | None:
    """Return *value* as a UUID, or None when it is not a well-formed id."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class QuizRepository:
    def __init__(self, db: Session, validator: QuizValidator | None = None):
        self.db = db
        self.validator = validator or QuizValidator()

    # ── Reads ────────────────────────────────────────────────────────────

    def get_by_id(self, quiz_id: str | uuid.UUID) -> Quiz:
        """Return the quiz whatever its active flag, or raise ``QuizNotFound``."""
        qid = parse_id(quiz_id)
        quiz = self.db.get(Quiz, qid) if qid is not None else None
        if quiz is None:
            raise QuizNotFound(f'Quiz with ID "{quiz_id}" not found', quizId=str(quiz_id))
        return quiz

    def get_public(self, quiz_id: str | uuid.UUID) -> Quiz:
        """Like ``get_by_id`` but an inactive quiz counts as absent."""
        quiz = self.get_by_id(quiz_id)
        if not quiz.is_active:
            raise QuizNotFound(
                f'Quiz with ID "{quiz_id}" is not available', quizId=str(quiz_id)
            )
        return quiz

    def get_by_title(self, title: str) -> Quiz | None:
        return self.db.query(Quiz).filter(Quiz.title == title).first()

    def list(
        self,
        category: str | None = None,
        difficulty: str | None = None,
        is_active: bool = True,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Quiz], int]:
        """Newest first. Returns ``(items, total)`` where total ignores paging."""
        query = self.db.query(Quiz).filter(Quiz.is_active == is_active)
        if category:
            query = query.filter(Quiz.category == category)
        if difficulty:
            query = query.filter(Quiz.difficulty == Difficulty(difficulty))

        total = query.count()
        items = (
            query.order_by(Quiz.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        logger.debug(
            "Quiz list category=%s difficulty=%s page=%d → %d/%d",
            category, difficulty, page, len(items), total,
        )
        return items, total

    def distinct_categories(self) -> list[str]:
        rows = (
            self.db.query(Quiz.category)
            .filter(Quiz.is_active.is_(True))
            .distinct()
            .order_by(Quiz.category)
            .all()
        )
        return [row[0] for row in rows]

    # ── Writes ───────────────────────────────────────────────────────────

    def create(self, quiz_in: QuizCreate) -> Quiz:
        """Validate, then persist a new quiz. Nothing is written on failure."""
        self.validator.validate(quiz_in)

        quiz = Quiz(
            title=quiz_in.title,
            description=quiz_in.description,
            category=quiz_in.category,
            difficulty=quiz_in.difficulty,
            estimated_minutes=quiz_in.estimated_minutes,
            is_active=quiz_in.is_active,
            questions=self._build_questions(quiz_in.questions, {}),
        )
        self.db.add(quiz)
        self._commit()
        self.db.refresh(quiz)
        logger.info("Created quiz %s (%s, %d questions)", quiz.id, quiz.title, quiz.question_count)
        return quiz

    def update(self, quiz_id: str | uuid.UUID, quiz_in: QuizCreate) -> Quiz:
        """Replace a quiz's content.

        Questions and answers carrying the id of an existing row are edited in
        place so that past attempts keep pointing at them; rows missing from
        *quiz_in* are removed. An id belonging to another quiz or question
        is ignored and the entry is stored as a new row.
        """
        quiz = self.get_by_id(quiz_id)
        self.validator.validate(quiz_in)

        quiz.title = quiz_in.title
        quiz.description = quiz_in.description
        quiz.category = quiz_in.category
        quiz.difficulty = quiz_in.difficulty
        quiz.estimated_minutes = quiz_in.estimated_minutes
        quiz.is_active = quiz_in.is_active
        quiz.questions = self._build_questions(
            quiz_in.questions, {q.id: q for q in quiz.questions}
        )
        quiz.updated_at = datetime.now(timezone.utc)

        self._commit()
        self.db.refresh(quiz)
        logger.info("Updated quiz %s (%d questions)", quiz.id, quiz.question_count)
        return quiz

    # ── helpers ──────────────────────────────────────────────────────────

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _build_questions(
        self,
        questions_in: list[QuestionCreate],
        existing: dict[uuid.UUID, Question],
    ) -> list[Question]:
        questions: list[Question] = []
        for position, q_in in enumerate(questions_in):
            # ids not owned by this quiz, or repeated, get a fresh row
            question = existing.pop(q_in.id, None) if q_in.id else None
            if question is None:
                question = Question()
            question.text = q_in.text
            question.explanation = q_in.explanation
            question.order = q_in.order
            question.position = position
            question.answers = self._build_answers(
                q_in.answers, {a.id: a for a in question.answers}
            )
            questions.append(question)
        return questions

    @staticmethod
    def _build_answers(
        answers_in: list[AnswerCreate],
        existing: dict[uuid.UUID, Answer],
    ) -> list[Answer]:
        answers: list[Answer] = []
        for position, a_in in enumerate(answers_in):
            answer = existing.pop(a_in.id, None) if a_in.id else None
            if answer is None:
                answer = Answer()
            answer.text = a_in.text
            answer.is_correct = a_in.is_correct
            answer.position = position
            answers.append(answer)
        return answers
