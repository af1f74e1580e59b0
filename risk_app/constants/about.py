"""Static metadata describing the risk assessment client."""

APP_NAME = "CovidRiskQt"
APP_VERSION = "0.1"
