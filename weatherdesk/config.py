"""Configuration settings for the WeatherDesk backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger("weatherdesk.config")

WEATHER_API_KEY_PARAMETER = "/weatherdesk/openweather/api_key"


@lru_cache(maxsize=1)
def _ssm_client():
    # Default to a region so lookups do not fail in environments without AWS
    # configuration (e.g. CI test runners).
    return boto3.client(
        "ssm",
        region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1",
    )


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_weather_api_key() -> str:
    """Return the OpenWeatherMap API key.

    ``OPENWEATHER_API_KEY`` wins when set. Otherwise the key is read from AWS
    SSM Parameter Store and cached in-memory. Any failure to retrieve it
    results in a runtime error.
    """

    from_env = os.getenv("OPENWEATHER_API_KEY")
    if from_env:
        return from_env

    try:
        response = _ssm_client().get_parameter(
            Name=WEATHER_API_KEY_PARAMETER, WithDecryption=True
        )
        value = response.get("Parameter", {}).get("Value")
    except (ClientError, BotoCoreError) as exc:  # pragma: no cover - AWS error passthrough
        logger.error("Failed to load weather API key from SSM: %s", exc)
        raise RuntimeError("Unable to load weather API key from SSM") from exc

    if not value:
        logger.error("Received empty weather API key from SSM")
        raise RuntimeError("Weather API key not configured in SSM")

    return value


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    weatherdesk_env: str = os.getenv("WEATHERDESK_ENV", "local")
    log_level: str = os.getenv("WEATHERDESK_LOG_LEVEL", "INFO")
    database_url: str = os.getenv("WEATHERDESK_DB_URL", "sqlite:///./weather_data.db")
    echo_sql: bool = _get_bool("WEATHERDESK_ECHO_SQL")

    # Upstream weather provider (OpenWeatherMap 2.5)
    weather_base_url: str = os.getenv(
        "WEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5"
    )
    weather_timeout: float = float(os.getenv("WEATHER_TIMEOUT", "5.0"))
    weather_api_key: str = ""

    # History
    history_list_limit: int = int(os.getenv("HISTORY_LIST_LIMIT", "100"))

    # Server
    host: str = os.getenv("WEATHERDESK_HOST", "0.0.0.0")
    port: int = int(os.getenv("WEATHERDESK_PORT", "8000"))

    @property
    def is_development(self) -> bool:
        return self.weatherdesk_env.lower() in {"dev", "development"}


settings = Settings()

# Populate the API key lazily so tests can override behavior via env
try:
    settings.weather_api_key = get_weather_api_key()
except RuntimeError:
    logger.warning("Weather API key not available at import time")

__all__ = ["settings", "Settings", "get_weather_api_key"]
