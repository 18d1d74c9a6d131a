"""Unit tests for the quiz structure rules."""

import itertools

import pytest

from quiz_service.core.exceptions import (
    MultipleCorrectAnswers,
    NoCorrectAnswer,
    StructureError,
    TooFewAnswers,
)
from quiz_service.schemas.quiz import QuizCreate
from quiz_service.services.quiz_validator import QuizValidator

from helpers import build_quiz, quiz_payload

validator = QuizValidator()


def test_accepts_well_formed_quiz():
    validator.validate(build_quiz([[True, False], [False, True, False], [False, False, False, True]]))


def test_accepts_quiz_without_questions():
    validator.validate(build_quiz([]))


def test_no_correct_answer():
    with pytest.raises(NoCorrectAnswer) as exc:
        validator.validate(build_quiz([[True, False], [False, False, False]]))
    assert exc.value.question_index == 2
    assert exc.value.status_code == 422


def test_multiple_correct_answers():
    with pytest.raises(MultipleCorrectAnswers) as exc:
        validator.validate(build_quiz([[True, True, False]]))
    assert exc.value.question_index == 1
    assert "Only one is allowed" in exc.value.message


def test_too_few_answers():
    with pytest.raises(TooFewAnswers) as exc:
        validator.validate(build_quiz([[True, False], [True]]))
    assert exc.value.question_index == 2


def test_zero_answers_reports_missing_correct_answer_first():
    with pytest.raises(NoCorrectAnswer):
        validator.validate(build_quiz([[]]))


def test_first_failing_question_wins():
    with pytest.raises(MultipleCorrectAnswers) as exc:
        validator.validate(build_quiz([[True, False], [True, True], [False, False]]))
    assert exc.value.question_index == 2


def test_excerpt_truncated_to_thirty_characters():
    quiz = build_quiz([[False, False]])
    quiz.questions[0].text = "A" * 50
    with pytest.raises(StructureError) as exc:
        validator.validate(quiz)
    assert exc.value.question_excerpt == "A" * 30
    assert exc.value.details == {"questionIndex": 1, "questionExcerpt": "A" * 30}


def test_validates_create_payloads_too():
    payload = quiz_payload(questions=2)
    payload["questions"][1]["answers"][2]["isCorrect"] = True
    with pytest.raises(MultipleCorrectAnswers):
        validator.validate(QuizCreate.model_validate(payload))


# Every combination of 0–2 correct flags over 1–4 answers, across two questions.
_QUESTION_SHAPES = [
    flags
    for size in range(1, 5)
    for flags in itertools.product([False, True], repeat=size)
    if sum(flags) <= 2
]


@pytest.mark.parametrize("first", _QUESTION_SHAPES)
@pytest.mark.parametrize("second", [(True, False), (False, False), (True, True), (True,)])
def test_accepts_iff_every_question_is_well_formed(first, second):
    def ok(flags):
        return sum(flags) == 1 and len(flags) >= 2

    quiz = build_quiz([list(first), list(second)])
    if ok(first) and ok(second):
        validator.validate(quiz)
    else:
        with pytest.raises(StructureError):
            validator.validate(quiz)
