"""Qt UI components for the risk assessment client."""

from .questionnaire_window import QuestionnaireWindow

__all__ = ["QuestionnaireWindow"]
