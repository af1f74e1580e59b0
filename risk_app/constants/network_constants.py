"""Network configuration constants for the prediction service client."""

PREDICTION_BASE_URL: str = "https://kiyoya123-covid19.hf.space/"
PREDICTION_PATH: str = "predict/"
REQUEST_TIMEOUT_SECONDS: float = 10.0
LOG_HTTP_BODIES: bool = True
