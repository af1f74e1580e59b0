"""HTTP client for the remote prediction service."""

from __future__ import annotations

import logging

import httpx

from risk_app.constants.network_constants import (
    LOG_HTTP_BODIES,
    PREDICTION_BASE_URL,
    PREDICTION_PATH,
    REQUEST_TIMEOUT_SECONDS,
)
from risk_app.constants.questionnaire_constants import NO_RESULT_TEXT
from risk_app.core.errors import PredictionServiceError, PredictionTransportError
from risk_app.core.prediction_schema import PredictionInput

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request) -> None:
    logger.info("--> %s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info("<-- %s %s %s", response.status_code, request.method, request.url)


class PredictionClient:
    """Posts completed answer records and returns the service's risk text."""

    def __init__(
        self,
        base_url: str = PREDICTION_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Either build an owned client (optionally over ``transport``) or use ``http_client``."""
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url,
                timeout=timeout,
                transport=transport,
                event_hooks={"request": [_log_request], "response": [_log_response]},
            )
        self._http_client = http_client

    def __enter__(self) -> PredictionClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._http_client.close()

    def predict(self, record: PredictionInput) -> str:
        """Send one prediction request.

        Returns the response body verbatim on success. Raises
        PredictionServiceError for a non-success status and
        PredictionTransportError when no response was received. There are no
        retries.
        """
        body = record.to_json_body()
        if LOG_HTTP_BODIES:
            logger.debug("Request body: %s", body)
        try:
            response = self._http_client.post(
                PREDICTION_PATH,
                json=body,
                headers={"Accept": "text/plain"},
            )
        except httpx.HTTPError as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("Prediction request failed before a response: %s", message)
            raise PredictionTransportError(message) from exc

        if LOG_HTTP_BODIES:
            logger.debug("Response body: %s", response.text)
        if not response.is_success:
            logger.warning(
                "Prediction service returned %s %s", response.status_code, response.reason_phrase
            )
            raise PredictionServiceError(response.status_code, response.reason_phrase)
        return response.text or NO_RESULT_TEXT
