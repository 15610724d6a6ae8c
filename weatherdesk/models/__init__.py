"""Pydantic models for the WeatherDesk backend."""

from .history import (
    DateRange,
    HistoryCreateResponse,
    MessageResponse,
    WeatherSearchCreate,
    WeatherSearchRecord,
    WeatherSearchUpdate,
    WeatherSnapshotData,
)
from .weather import Coordinates, ForecastDay, ForecastSample, WeatherObservation

__all__ = [
    "Coordinates",
    "DateRange",
    "ForecastDay",
    "ForecastSample",
    "HistoryCreateResponse",
    "MessageResponse",
    "WeatherObservation",
    "WeatherSearchCreate",
    "WeatherSearchRecord",
    "WeatherSearchUpdate",
    "WeatherSnapshotData",
]
