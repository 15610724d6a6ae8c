"""Error taxonomy shared by the services and the API layer."""

from __future__ import annotations


class WeatherDeskError(Exception):
    """Base class for expected failures surfaced to API callers."""

    status_code: int = 500
    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WeatherDeskError):
    """Caller-supplied data violates a record contract."""

    status_code = 400
    default_message = "Invalid request data"


class NotFound(WeatherDeskError):
    status_code = 404
    default_message = "Weather record not found"


class LocationNotFound(WeatherDeskError):
    status_code = 404
    default_message = "Location not found. Please check the location name and try again."


class UpstreamAuthError(WeatherDeskError):
    status_code = 401
    default_message = "Invalid API key. Please check the weather provider configuration."


class UpstreamUnavailable(WeatherDeskError):
    status_code = 500
    default_message = "Failed to fetch weather data. Please try again later."


class UnsupportedFormat(WeatherDeskError):
    status_code = 400
    default_message = "Unsupported export format. Use json, csv, or xml."


class NoData(WeatherDeskError):
    status_code = 404
    default_message = "No data available for export"


__all__ = [
    "LocationNotFound",
    "NoData",
    "NotFound",
    "UnsupportedFormat",
    "UpstreamAuthError",
    "UpstreamUnavailable",
    "ValidationError",
    "WeatherDeskError",
]
