"""Controller walking the user through the questionnaire and its single submission."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
import logging
from threading import Lock, RLock

from risk_app.constants.questionnaire_constants import QUESTION_COUNT, TRANSPORT_ERROR_TEMPLATE
from risk_app.core.errors import PredictionError, QuestionnaireStateError
from risk_app.core.models import Answer, QuestionnaireSnapshot, SubmissionState
from risk_app.core.prediction_client import PredictionClient
from risk_app.core.prediction_schema import PredictionInput, build_prediction_record

logger = logging.getLogger("risk_app.questionnaire")

SnapshotListener = Callable[[QuestionnaireSnapshot], None]


def _coerce_answer(value: int | bool) -> Answer:
    if value not in (Answer.NO, Answer.YES):
        raise ValueError(f"Answer must be 0 or 1, got {value!r}.")
    return Answer(int(value))


class QuestionnaireController:
    """Owns the questionnaire state and performs the prediction request.

    Every transition replaces the current snapshot and notifies subscribers.
    A transition and its notifications run as one step, so listeners see
    snapshots in the order the state took them. Listeners may be called from
    the worker thread that ran the request; an exception raised by a listener
    is logged and does not change the state. The executor must run submitted
    work on another thread.
    """

    def __init__(self, client: PredictionClient, *, executor: Executor | None = None) -> None:
        self._client = client
        self._owns_executor = executor is None
        if executor is None:
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="PredictionRequest")
        self._executor = executor
        self._lock = Lock()
        # Held from a state change until its listeners have run.
        self._transition_lock = RLock()
        self._snapshot = QuestionnaireSnapshot()
        self._listeners: list[SnapshotListener] = []

    @property
    def snapshot(self) -> QuestionnaireSnapshot:
        with self._lock:
            return self._snapshot

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # --- Answering ---

    def answer(self, value: int | bool) -> QuestionnaireSnapshot:
        """Append an answer to the current question."""
        answer = _coerce_answer(value)
        with self._transition_lock:
            with self._lock:
                current = self._snapshot
                if not current.can_answer:
                    raise QuestionnaireStateError(
                        f"Cannot answer: {current.answered_count} of {QUESTION_COUNT} answered, "
                        f"submission is {current.submission.status.name}."
                    )
                updated = current.with_answer(int(answer))
                self._snapshot = updated
            logger.debug("Answered question %s with %s", updated.answered_count, answer.name)
            self._notify(updated)
        return updated

    def answer_yes(self) -> QuestionnaireSnapshot:
        return self.answer(Answer.YES)

    def answer_no(self) -> QuestionnaireSnapshot:
        return self.answer(Answer.NO)

    def reset_answers(self) -> QuestionnaireSnapshot:
        """Discard answers given so far; only while answering is in progress."""
        with self._transition_lock:
            with self._lock:
                if not self._snapshot.can_reset_answers:
                    raise QuestionnaireStateError("Answers can only be reset while answering is in progress.")
                updated = QuestionnaireSnapshot()
                self._snapshot = updated
            logger.info("Answers reset")
            self._notify(updated)
        return updated

    def start_over(self) -> QuestionnaireSnapshot:
        """Clear answers and any result, returning to the first question."""
        with self._transition_lock:
            with self._lock:
                if not self._snapshot.can_start_over:
                    raise QuestionnaireStateError("Cannot start over while a prediction request is running.")
                updated = QuestionnaireSnapshot()
                self._snapshot = updated
            logger.info("Starting over")
            self._notify(updated)
        return updated

    # --- Submission ---

    def submit(self) -> Future[QuestionnaireSnapshot]:
        """Send the completed answers to the prediction service.

        The state moves to in-flight before this returns. The returned future
        resolves with the snapshot holding the result or the error message.
        """
        with self._transition_lock:
            with self._lock:
                current = self._snapshot
                if not current.can_submit:
                    raise QuestionnaireStateError(
                        f"Cannot submit: {current.answered_count} of {QUESTION_COUNT} answered, "
                        f"submission is {current.submission.status.name}."
                    )
                record = build_prediction_record(current.answers)
                in_flight = current.with_submission(SubmissionState.in_flight())
                self._snapshot = in_flight

            # The request is scheduled before anyone is told it is in flight.
            try:
                future = self._executor.submit(self._run_submission, record)
            except RuntimeError:
                with self._lock:
                    self._snapshot = current
                raise

            logger.info("Submitting %s answers for prediction", QUESTION_COUNT)
            self._notify(in_flight)
        return future

    def _run_submission(self, record: PredictionInput) -> QuestionnaireSnapshot:
        try:
            result = self._client.predict(record)
        except PredictionError as exc:
            logger.warning("Prediction failed: %s", exc.user_message)
            submission = SubmissionState.failed(exc.user_message)
        except Exception as exc:
            logger.exception("Unexpected error during prediction request")
            submission = SubmissionState.failed(TRANSPORT_ERROR_TEMPLATE.format(message=exc))
        else:
            logger.info("Prediction result: %s", result)
            submission = SubmissionState.succeeded(result)

        with self._transition_lock:
            with self._lock:
                updated = self._snapshot.with_submission(submission)
                self._snapshot = updated
            self._notify(updated)
        return updated

    def shutdown(self, wait: bool = True) -> None:
        """Stop the request worker if the controller created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def _notify(self, snapshot: QuestionnaireSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener %r failed", listener)
