"""Questionnaire constants shared across UI and core layers."""

QUESTION_COUNT: int = 20
YES_VALUE: int = 1
NO_VALUE: int = 0
NO_RESULT_TEXT: str = "No result"
SERVICE_ERROR_TEMPLATE: str = "Error: {code} - {reason}"
TRANSPORT_ERROR_TEMPLATE: str = "Network error: {message}"
