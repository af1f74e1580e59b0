"""Qt main window rendering the questionnaire controller's state."""

from __future__ import annotations

import logging

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from risk_app.constants.ui_constants import (
    HEADING_TEXT,
    INSTRUCTIONS_TEXT,
    PROGRESS_TEMPLATE,
    RESET_ANSWERS_BUTTON,
    START_OVER_BUTTON,
    SUBMIT_BUTTON,
    SUBMITTING_BUTTON,
    THEME_NAME,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from risk_app.core.errors import QuestionnaireStateError
from risk_app.core.models import QuestionnaireSnapshot
from risk_app.core.questionnaire_controller import QuestionnaireController
from risk_app.styling.color_palette import Theme
from risk_app.styling.styles import Styles
from risk_app.ui.components.question_card import QuestionCard
from risk_app.ui.components.result_card import ResultCard

logger = logging.getLogger(__name__)

_PROGRESS_STEPS = 1000


class QuestionnaireWindow(QMainWindow):
    """Main window: question card, progress, submit and result areas."""

    # Snapshots may arrive from the request worker thread.
    snapshot_changed = Signal(object)

    def __init__(self, controller: QuestionnaireController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(WINDOW_MIN_WIDTH)
        self.controller = controller
        self.theme = Theme.from_name(THEME_NAME)

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style(self.theme))

        self.snapshot_changed.connect(self._render)
        self._unsubscribe = self.controller.subscribe(self.snapshot_changed.emit)
        self._render(self.controller.snapshot)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)
        central_widget.setLayout(layout)

        heading = QLabel(HEADING_TEXT, self)
        heading.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(heading)
        layout.addWidget(QLabel(INSTRUCTIONS_TEXT, self))

        self.question_card = QuestionCard(
            on_yes=self._handle_yes,
            on_no=self._handle_no,
            theme=self.theme,
            parent=self,
        )
        layout.addWidget(self.question_card)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, _PROGRESS_STEPS)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.progress_label = QLabel("", self)
        layout.addWidget(self.progress_label)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button)

        self.result_card = ResultCard(theme=self.theme, parent=self)
        layout.addWidget(self.result_card)

        self.start_over_button = QPushButton(START_OVER_BUTTON, self)
        self.start_over_button.clicked.connect(self._handle_start_over)
        layout.addWidget(self.start_over_button)

        self.reset_button = QPushButton(RESET_ANSWERS_BUTTON, self)
        self.reset_button.setObjectName("outlinedButton")
        self.reset_button.clicked.connect(self._handle_reset_answers)
        layout.addWidget(self.reset_button)

        layout.addStretch()

    def _render(self, snapshot: QuestionnaireSnapshot) -> None:
        self.question_card.render(snapshot)

        self.progress_bar.setValue(round(snapshot.progress * _PROGRESS_STEPS))
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(
                answered=snapshot.answered_count,
                total=snapshot.total_questions,
            )
        )

        in_flight = snapshot.submission.is_in_flight
        self.submit_button.setVisible(snapshot.is_complete and not snapshot.has_outcome)
        self.submit_button.setEnabled(snapshot.can_submit)
        self.submit_button.setText(SUBMITTING_BUTTON if in_flight else SUBMIT_BUTTON)

        self.result_card.render(snapshot)
        self.start_over_button.setVisible(snapshot.has_outcome)
        self.reset_button.setVisible(snapshot.can_reset_answers)

    # --- Handlers ---

    def _handle_yes(self) -> None:
        self._run_action(self.controller.answer_yes)

    def _handle_no(self) -> None:
        self._run_action(self.controller.answer_no)

    def _handle_submit(self) -> None:
        self._run_action(self.controller.submit)

    def _handle_start_over(self) -> None:
        self._run_action(self.controller.start_over)

    def _handle_reset_answers(self) -> None:
        self._run_action(self.controller.reset_answers)

    def _run_action(self, action: callable) -> None:
        try:
            action()
        except QuestionnaireStateError as exc:
            # A stale click that arrived before the widgets were re-rendered.
            logger.warning("Ignored action: %s", exc)

    def closeEvent(self, event) -> None:
        self._unsubscribe()
        super().closeEvent(event)
