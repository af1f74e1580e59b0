"""Shared fixtures: fake prediction clients and a fake prediction service."""

from __future__ import annotations

from threading import Event

import httpx
import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from risk_app.core.prediction_client import PredictionClient
from risk_app.core.prediction_schema import PredictionInput
from risk_app.core.questionnaire_controller import QuestionnaireController


class RecordingClient:
    """Stands in for PredictionClient; returns a canned result or raises."""

    def __init__(self, result: str = "Low Risk", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.records: list[PredictionInput] = []

    def predict(self, record: PredictionInput) -> str:
        self.records.append(record)
        if self.error is not None:
            raise self.error
        return self.result


class BlockingClient(RecordingClient):
    """Holds the request open until ``release`` is set."""

    def __init__(self, result: str = "Low Risk") -> None:
        super().__init__(result=result)
        self.started = Event()
        self.release = Event()

    def predict(self, record: PredictionInput) -> str:
        self.started.set()
        if not self.release.wait(timeout=5):
            raise TimeoutError("test never released the request")
        return super().predict(record)


def mock_prediction_client(handler) -> PredictionClient:
    """PredictionClient whose HTTP traffic goes to ``handler``."""
    return PredictionClient("http://prediction.test/", transport=httpx.MockTransport(handler))


def create_fake_service(result: str = "Low Risk") -> tuple[FastAPI, list[dict[str, float]]]:
    """FastAPI app imitating the prediction service's ``POST /predict/``."""
    app = FastAPI()
    received: list[dict[str, float]] = []

    @app.post("/predict/", response_class=PlainTextResponse)
    def predict(payload: PredictionInput) -> str:
        received.append(payload.model_dump())
        return result

    return app, received


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def controller(recording_client: RecordingClient):
    controller = QuestionnaireController(recording_client)
    yield controller
    controller.shutdown()


def answer_all(controller: QuestionnaireController, values) -> None:
    for value in values:
        controller.answer(value)
