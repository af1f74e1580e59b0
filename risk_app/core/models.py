"""Domain models for the risk questionnaire."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

from risk_app.constants.questionnaire_constants import NO_VALUE, QUESTION_COUNT, YES_VALUE
from risk_app.core.question_catalog import Question, question_at


class Answer(IntEnum):
    """Binary answer to one catalog question."""

    NO = NO_VALUE
    YES = YES_VALUE


class SubmissionStatus(Enum):
    """Phase of the single submission attempt of a session."""

    IDLE = auto()
    IN_FLIGHT = auto()
    SUCCEEDED = auto()
    FAILED = auto()


class QuestionnairePhase(Enum):
    """State of the questionnaire as seen by the presentation layer."""

    ANSWERING = auto()
    READY_TO_SUBMIT = auto()
    SUBMITTING = auto()
    RESULTED = auto()


@dataclass(frozen=True, slots=True)
class SubmissionState:
    """Tagged submission state; ``result`` and ``error_message`` belong to one tag each."""

    status: SubmissionStatus = SubmissionStatus.IDLE
    result: str | None = None
    error_message: str | None = None

    @classmethod
    def idle(cls) -> SubmissionState:
        return cls(SubmissionStatus.IDLE)

    @classmethod
    def in_flight(cls) -> SubmissionState:
        return cls(SubmissionStatus.IN_FLIGHT)

    @classmethod
    def succeeded(cls, result: str) -> SubmissionState:
        return cls(SubmissionStatus.SUCCEEDED, result=result)

    @classmethod
    def failed(cls, message: str) -> SubmissionState:
        return cls(SubmissionStatus.FAILED, error_message=message)

    @property
    def is_idle(self) -> bool:
        return self.status is SubmissionStatus.IDLE

    @property
    def is_in_flight(self) -> bool:
        return self.status is SubmissionStatus.IN_FLIGHT

    @property
    def has_outcome(self) -> bool:
        return self.status in (SubmissionStatus.SUCCEEDED, SubmissionStatus.FAILED)


@dataclass(frozen=True, slots=True)
class QuestionnaireSnapshot:
    """Immutable view of the answers given so far and the submission state."""

    answers: tuple[int, ...] = ()
    submission: SubmissionState = field(default_factory=SubmissionState.idle)

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def total_questions(self) -> int:
        return QUESTION_COUNT

    @property
    def progress(self) -> float:
        return self.answered_count / QUESTION_COUNT

    @property
    def is_complete(self) -> bool:
        return self.answered_count == QUESTION_COUNT

    @property
    def current_question(self) -> Question | None:
        """Question awaiting an answer, or None once all have been answered."""
        if self.is_complete:
            return None
        return question_at(self.answered_count)

    @property
    def can_answer(self) -> bool:
        return not self.is_complete and self.submission.is_idle

    @property
    def can_submit(self) -> bool:
        return self.is_complete and self.submission.is_idle

    @property
    def can_reset_answers(self) -> bool:
        return 0 < self.answered_count < QUESTION_COUNT and self.submission.is_idle

    @property
    def can_start_over(self) -> bool:
        return not self.submission.is_in_flight

    @property
    def has_outcome(self) -> bool:
        return self.submission.has_outcome

    @property
    def phase(self) -> QuestionnairePhase:
        if self.submission.is_in_flight:
            return QuestionnairePhase.SUBMITTING
        if self.submission.has_outcome:
            return QuestionnairePhase.RESULTED
        if self.is_complete:
            return QuestionnairePhase.READY_TO_SUBMIT
        return QuestionnairePhase.ANSWERING

    def with_answer(self, answer: int) -> QuestionnaireSnapshot:
        return QuestionnaireSnapshot(answers=self.answers + (answer,), submission=self.submission)

    def with_submission(self, submission: SubmissionState) -> QuestionnaireSnapshot:
        return QuestionnaireSnapshot(answers=self.answers, submission=submission)
