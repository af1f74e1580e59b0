"""Application entry point for the COVID-19 risk assessment client."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from risk_app.constants.about import APP_NAME, APP_VERSION
from risk_app.constants.network_constants import PREDICTION_BASE_URL
from risk_app.core.prediction_client import PredictionClient
from risk_app.core.questionnaire_controller import QuestionnaireController
from risk_app.ui.questionnaire_window import QuestionnaireWindow
from risk_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the controller to the service, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s…", APP_NAME, APP_VERSION)
    logger.info("Prediction service at %s", PREDICTION_BASE_URL)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    with PredictionClient(PREDICTION_BASE_URL) as client:
        controller = QuestionnaireController(client)
        window = QuestionnaireWindow(controller=controller)
        window.show()
        exit_code = app.exec()
        controller.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
