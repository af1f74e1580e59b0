"""Card showing the current question with its Yes/No buttons."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from risk_app.constants.ui_constants import NO_BUTTON, QUESTION_NUMBER_TEMPLATE, YES_BUTTON
from risk_app.core.models import QuestionnaireSnapshot
from risk_app.styling.color_palette import Theme
from risk_app.styling.styles import Styles


class QuestionCard(QFrame):
    """UI component asking the question the controller is waiting on."""

    def __init__(
        self,
        on_yes: callable,
        on_no: callable,
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_yes = on_yes
        self.on_no = on_no
        self.theme = theme
        self._build_ui()

    def _build_ui(self) -> None:
        self.setStyleSheet(Styles.get_card_style(self.theme))
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        self.setLayout(layout)

        self.number_label = QLabel("", self)
        self.number_label.setStyleSheet(Styles.get_caption_style())
        layout.addWidget(self.number_label)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.question_label)

        button_row = QHBoxLayout()
        button_row.setSpacing(16)
        self.yes_button = QPushButton(YES_BUTTON, self)
        self.yes_button.clicked.connect(self.on_yes)
        button_row.addWidget(self.yes_button, stretch=1)

        self.no_button = QPushButton(NO_BUTTON, self)
        self.no_button.clicked.connect(self.on_no)
        button_row.addWidget(self.no_button, stretch=1)
        layout.addLayout(button_row)

    def render(self, snapshot: QuestionnaireSnapshot) -> None:
        question = snapshot.current_question
        self.setVisible(question is not None)
        if question is None:
            return
        self.number_label.setText(
            QUESTION_NUMBER_TEMPLATE.format(
                number=snapshot.answered_count + 1,
                total=snapshot.total_questions,
            )
        )
        self.question_label.setText(question.label)
        self.yes_button.setEnabled(snapshot.can_answer)
        self.no_button.setEnabled(snapshot.can_answer)
