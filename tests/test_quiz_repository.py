"""Tests for quiz storage and its validating write path."""

import uuid

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from quiz_service.core.exceptions import NoCorrectAnswer, QuizNotFound, TooFewAnswers
from quiz_service.db.models import Question, Quiz
from quiz_service.db.seed_data import QUIZ_SEEDS
from quiz_service.schemas.quiz import QuizCreate
from quiz_service.seed import seed_quizzes
from quiz_service.services.quiz_repository import QuizRepository

from helpers import quiz_payload


class TestWritePath:
    def test_create_persists_graph_in_order(self, db: Session):
        quiz = QuizRepository(db).create(QuizCreate.model_validate(quiz_payload(questions=3)))

        assert quiz.id is not None
        assert quiz.question_count == 3
        assert [q.order for q in quiz.questions] == [1, 2, 3]
        assert all(len(q.answers) == 4 for q in quiz.questions)
        assert [a.text for a in quiz.questions[0].answers] == [
            "Option 1", "Option 2", "Option 3", "Option 4",
        ]

    def test_invalid_quiz_is_never_persisted(self, db: Session):
        payload = quiz_payload()
        for answer in payload["questions"][1]["answers"]:
            answer["isCorrect"] = False

        with pytest.raises(NoCorrectAnswer) as exc:
            QuizRepository(db).create(QuizCreate.model_validate(payload))
        assert exc.value.question_index == 2
        assert db.query(Quiz).count() == 0

    def test_update_keeps_ids_and_changes_content(self, db: Session, make_quiz):
        repo = QuizRepository(db)
        quiz = make_quiz()
        question_ids = [q.id for q in quiz.questions]

        payload = quiz_payload()
        for q_in, q in zip(payload["questions"], quiz.questions):
            q_in["id"] = str(q.id)
            for a_in, a in zip(q_in["answers"], q.answers):
                a_in["id"] = str(a.id)
        payload["questions"][0]["explanation"] = "Rewritten"
        payload["questions"] = payload["questions"][:2]

        updated = repo.update(quiz.id, QuizCreate.model_validate(payload))

        assert [q.id for q in updated.questions] == question_ids[:2]
        assert updated.questions[0].explanation == "Rewritten"
        assert updated.question_count == 2

    def test_invalid_update_leaves_quiz_untouched(self, db: Session, make_quiz):
        repo = QuizRepository(db)
        quiz = make_quiz(title="Original")
        payload = quiz_payload(title="Changed")
        payload["questions"][0]["answers"] = payload["questions"][0]["answers"][:1]

        with pytest.raises(TooFewAnswers):
            repo.update(quiz.id, QuizCreate.model_validate(payload))

        db.expire_all()
        assert repo.get_by_id(quiz.id).title == "Original"

    def test_update_with_another_quizs_ids_creates_new_rows(self, db: Session, make_quiz):
        repo = QuizRepository(db)
        target, other = make_quiz(title="Target"), make_quiz(title="Other")
        foreign_question = other.questions[0]
        foreign_answer_ids = [a.id for a in foreign_question.answers]

        payload = quiz_payload(title="Target", questions=1)
        payload["questions"][0]["id"] = str(foreign_question.id)
        for a_in, answer_id in zip(payload["questions"][0]["answers"], foreign_answer_ids):
            a_in["id"] = str(answer_id)

        updated = repo.update(target.id, QuizCreate.model_validate(payload))

        assert updated.question_count == 1
        assert updated.questions[0].id != foreign_question.id
        assert all(a.id not in foreign_answer_ids for a in updated.questions[0].answers)

        db.expire_all()
        untouched = repo.get_by_id(other.id)
        assert untouched.question_count == 3
        assert untouched.questions[0].id == foreign_question.id
        assert db.query(Question).count() == 4

    def test_repeated_question_id_is_stored_once_in_place(self, db: Session, make_quiz):
        repo = QuizRepository(db)
        quiz = make_quiz(questions=2)
        first_id = quiz.questions[0].id

        payload = quiz_payload(questions=2)
        for q_in in payload["questions"]:
            q_in["id"] = str(first_id)

        updated = repo.update(quiz.id, QuizCreate.model_validate(payload))

        assert updated.question_count == 2
        assert updated.questions[0].id == first_id
        assert updated.questions[1].id != first_id

    def test_failed_commit_rolls_back_pending_changes(self, db: Session, make_quiz, monkeypatch):
        repo = QuizRepository(db)
        quiz = make_quiz(title="Original")

        def broken_commit():
            raise OperationalError("COMMIT", {}, Exception("connection lost"))

        monkeypatch.setattr(db, "commit", broken_commit)
        with pytest.raises(OperationalError):
            repo.update(quiz.id, QuizCreate.model_validate(quiz_payload(title="Changed")))
        monkeypatch.undo()

        assert repo.get_by_id(quiz.id).title == "Original"
        assert db.query(Question).count() == 3


class TestReads:
    def test_get_by_id_unknown_and_malformed(self, db: Session):
        repo = QuizRepository(db)
        with pytest.raises(QuizNotFound):
            repo.get_by_id(uuid.uuid4())
        with pytest.raises(QuizNotFound):
            repo.get_by_id("not-a-uuid")

    def test_inactive_quiz_hidden_from_public_lookup(self, db: Session, make_quiz):
        repo = QuizRepository(db)
        quiz = make_quiz(is_active=False)

        assert repo.get_by_id(quiz.id).id == quiz.id
        with pytest.raises(QuizNotFound) as exc:
            repo.get_public(quiz.id)
        assert "not available" in exc.value.message

    def test_list_filters_and_paginates(self, db: Session, make_quiz):
        for i in range(3):
            make_quiz(title=f"Py {i}", category="Programming")
        make_quiz(title="Stats", category="Math", difficulty="advanced")
        make_quiz(title="Hidden", category="Math", is_active=False)

        repo = QuizRepository(db)
        items, total = repo.list(page=1, limit=2)
        assert total == 4
        assert len(items) == 2

        items, total = repo.list(category="Math")
        assert [q.title for q in items] == ["Stats"]

        items, total = repo.list(difficulty="advanced")
        assert total == 1

        items, total = repo.list(is_active=False)
        assert [q.title for q in items] == ["Hidden"]

    def test_distinct_categories_only_active(self, db: Session, make_quiz):
        make_quiz(title="A", category="Programming")
        make_quiz(title="B", category="Programming")
        make_quiz(title="C", category="Math")
        make_quiz(title="D", category="Secret", is_active=False)

        assert QuizRepository(db).distinct_categories() == ["Math", "Programming"]


class TestSeed:
    def test_seed_loads_catalogue_once(self, db: Session):
        created = seed_quizzes(db)
        assert created == 3
        assert seed_quizzes(db) == 0

        repo = QuizRepository(db)
        quizzes, total = repo.list(limit=50)
        assert total == len(QUIZ_SEEDS)
        assert {q.title: q.question_count for q in quizzes} == {
            s["title"]: len(s["questions"]) for s in QUIZ_SEEDS
        }
        for quiz in quizzes:
            assert [q.order for q in quiz.questions] == list(range(1, quiz.question_count + 1))
