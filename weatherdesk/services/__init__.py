"""Service-layer helpers for the WeatherDesk backend."""

from .export import ExportPayload, export_records
from .forecast import FORECAST_DAYS, bucket_forecast
from .history import HistoryStore
from .weather_service import WeatherService

__all__ = [
    "ExportPayload",
    "FORECAST_DAYS",
    "HistoryStore",
    "WeatherService",
    "bucket_forecast",
    "export_records",
]
