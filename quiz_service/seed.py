"""One-time DB setup: create tables and load the built-in quizzes.

Run with ``python -m quiz_service.seed``. Quizzes whose title already exists
are left untouched, so the command can be repeated safely.
"""

import logging

from sqlalchemy.orm import Session

from quiz_service.db.seed_data import QUIZ_SEEDS
from quiz_service.db.session import create_tables, get_session_factory
from quiz_service.schemas.quiz import QuizCreate
from quiz_service.services.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)


def seed_quizzes(db: Session, seeds: list[dict] = QUIZ_SEEDS) -> int:
    """Insert every seed quiz that is not already present. Returns the number created."""
    repo = QuizRepository(db)
    created = 0
    for raw in seeds:
        quiz_in = QuizCreate.model_validate(raw)
        for order, question in enumerate(quiz_in.questions, start=1):
            if "order" not in question.model_fields_set:
                question.order = order

        if repo.get_by_title(quiz_in.title) is not None:
            logger.info("  Quiz already exists: %s", quiz_in.title)
            continue

        quiz = repo.create(quiz_in)
        created += 1
        logger.info("✅ Seeded quiz: %s (%d questions)", quiz.title, quiz.question_count)
    return created


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    create_tables()
    logger.info("✅ All tables created")

    session_factory = get_session_factory()
    with session_factory() as db:
        created = seed_quizzes(db)
        logger.info("Seeding done: %d new quiz(zes)", created)


if __name__ == "__main__":
    main()
