"""Card presenting the prediction result or the error message."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from risk_app.constants.ui_constants import ERROR_HEADING, RESULT_HEADING
from risk_app.core.models import QuestionnaireSnapshot, SubmissionStatus
from risk_app.styling.color_palette import Theme
from risk_app.styling.styles import Styles


class ResultCard(QFrame):
    """Shows exactly one terminal outcome of a submission."""

    def __init__(self, theme: Theme = Theme.LIGHT, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.theme = theme
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        self.setLayout(layout)

        self.heading_label = QLabel("", self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.message_label = QLabel("", self)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

    def render(self, snapshot: QuestionnaireSnapshot) -> None:
        submission = snapshot.submission
        self.setVisible(submission.has_outcome)
        if not submission.has_outcome:
            return

        is_error = submission.status is SubmissionStatus.FAILED
        self.setStyleSheet(Styles.get_result_card_style(is_error, self.theme))
        if is_error:
            self.heading_label.setText(ERROR_HEADING)
            self.message_label.setText(submission.error_message or "")
            self.message_label.setStyleSheet("")
        else:
            self.heading_label.setText(RESULT_HEADING)
            self.message_label.setText(submission.result or "")
            self.message_label.setStyleSheet(Styles.get_heading_style())
