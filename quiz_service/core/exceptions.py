"""Domain errors raised by the quiz core.

Every error carries an HTTP-ish ``status_code``, a stable ``error_code`` and a
``details`` dict; ``quiz_service.main`` renders them as ``ErrorResponse``.
"""

from typing import Any


class QuizServiceError(Exception):
    """Base exception for all quiz-service errors."""

    status_code: int = 400
    error_code: str = "quiz_service_error"

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)


# ── Quiz structure (authoring-time invariants) ────────────────────────────────


class StructureError(QuizServiceError):
    """A quiz definition violates a structural invariant."""

    status_code = 422
    error_code = "invalid_quiz_structure"

    def __init__(self, message: str, question_index: int, question_excerpt: str):
        self.question_index = question_index
        self.question_excerpt = question_excerpt
        super().__init__(
            message, questionIndex=question_index, questionExcerpt=question_excerpt
        )


class NoCorrectAnswer(StructureError):
    error_code = "no_correct_answer"


class MultipleCorrectAnswers(StructureError):
    error_code = "multiple_correct_answers"


class TooFewAnswers(StructureError):
    error_code = "too_few_answers"


# ── Submissions ───────────────────────────────────────────────────────────────


class SubmissionError(QuizServiceError):
    """The submitted answers do not fit the quiz they target."""

    status_code = 400
    error_code = "invalid_submission"


class DuplicateAnswer(SubmissionError):
    error_code = "duplicate_answer"

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(
            f"Duplicate answer for question {question_id}", questionId=question_id
        )


class UnknownQuestion(SubmissionError):
    error_code = "unknown_question"

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Invalid question ID: {question_id}", questionId=question_id)


class UnknownAnswer(SubmissionError):
    error_code = "unknown_answer"

    def __init__(self, answer_id: str, question_id: str):
        self.answer_id = answer_id
        self.question_id = question_id
        super().__init__(
            f"Invalid answer ID: {answer_id} for question: {question_id}",
            answerId=answer_id,
            questionId=question_id,
        )


class IncompleteSubmission(SubmissionError):
    error_code = "incomplete_submission"

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(
            f"Must answer all {expected} questions. Only {got} provided.",
            expected=expected,
            got=got,
        )


# ── Lookup / access ───────────────────────────────────────────────────────────


class NotFound(QuizServiceError):
    status_code = 404
    error_code = "not_found"


class QuizNotFound(NotFound):
    error_code = "quiz_not_found"


class AttemptNotFound(NotFound):
    error_code = "attempt_not_found"


class Forbidden(QuizServiceError):
    status_code = 403
    error_code = "forbidden"


class QuizInactive(QuizServiceError):
    """Submitting to a quiz that is not accepting submissions."""

    status_code = 400
    error_code = "quiz_inactive"


class PreconditionFailed(QuizServiceError):
    """Scoring was reached with input that never passed validation."""

    status_code = 500
    error_code = "precondition_failed"
