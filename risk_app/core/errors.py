"""Exceptions raised by the questionnaire core."""

from __future__ import annotations

from risk_app.constants.questionnaire_constants import (
    SERVICE_ERROR_TEMPLATE,
    TRANSPORT_ERROR_TEMPLATE,
)


class QuestionnaireStateError(RuntimeError):
    """Raised when an action is not available in the current questionnaire state."""


class PredictionError(Exception):
    """Base class for failures of a prediction request."""

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class PredictionServiceError(PredictionError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(SERVICE_ERROR_TEMPLATE.format(code=status_code, reason=reason))
        self.status_code = status_code
        self.reason = reason


class PredictionTransportError(PredictionError):
    """The request never produced a response (connection loss, timeout, ...)."""

    def __init__(self, message: str) -> None:
        super().__init__(TRANSPORT_ERROR_TEMPLATE.format(message=message))
        self.message = message
