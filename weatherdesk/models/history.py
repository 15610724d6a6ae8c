"""Request and response models for the weather search history."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import ConfigDict, Field

from weatherdesk.models.base import CamelModel
from weatherdesk.models.weather import Coordinates


class WeatherSearchCreate(CamelModel):
    """Payload for saving a weather search.

    Presence and range checks live in the history store so the same rules
    apply to every caller; this model only pins down field names and types.
    """

    model_config = ConfigDict(extra="forbid")

    location: Optional[str] = Field(default=None, description="Searched location")
    date_range_start: Optional[date] = Field(default=None, description="Start of the date range")
    date_range_end: Optional[date] = Field(default=None, description="End of the date range")
    temperature: Optional[float] = Field(default=None, description="Temperature in Celsius")
    condition: Optional[str] = Field(default=None, description="Weather condition")
    humidity: Optional[int] = Field(default=None, description="Humidity in percent")
    wind_speed: Optional[float] = Field(default=None, description="Wind speed in km/h")
    visibility: Optional[float] = Field(default=None, description="Visibility in kilometers")
    uv_index: Optional[int] = Field(default=None, description="UV index")
    sunrise: Optional[str] = Field(default=None, description="Local sunrise time")
    sunset: Optional[str] = Field(default=None, description="Local sunset time")
    coordinates: Optional[Coordinates] = Field(default=None, description="Location coordinates")


class WeatherSearchUpdate(CamelModel):
    """Payload for editing a saved search.

    Date range and coordinates are fixed at creation; if a client sends them
    they are dropped along with any other unknown key.
    """

    model_config = ConfigDict(extra="ignore")

    location: Optional[str] = Field(default=None, description="Searched location")
    temperature: Optional[float] = Field(default=None, description="Temperature in Celsius")
    condition: Optional[str] = Field(default=None, description="Weather condition")
    humidity: Optional[int] = Field(default=None, description="Humidity in percent")
    wind_speed: Optional[float] = Field(default=None, description="Wind speed in km/h")
    visibility: Optional[float] = Field(default=None, description="Visibility in kilometers")
    uv_index: Optional[int] = Field(default=None, description="UV index")


class DateRange(CamelModel):
    start: date
    end: date


class WeatherSnapshotData(CamelModel):
    """Observation fields captured when the search was saved."""

    temperature: float
    condition: str
    humidity: int
    wind_speed: float
    visibility: float
    uv_index: int
    sunrise: str
    sunset: str
    coordinates: Optional[Coordinates] = None


class WeatherSearchRecord(CamelModel):
    """A persisted weather search as returned to callers."""

    id: int
    location: str
    date_searched: datetime
    date_range: Optional[DateRange] = None
    weather_data: WeatherSnapshotData
    created_at: datetime
    updated_at: datetime


class HistoryCreateResponse(CamelModel):
    id: int = Field(..., description="Identifier assigned to the saved search")
    message: str = "Weather data saved successfully"


class MessageResponse(CamelModel):
    message: str


__all__ = [
    "DateRange",
    "HistoryCreateResponse",
    "MessageResponse",
    "WeatherSearchCreate",
    "WeatherSearchRecord",
    "WeatherSearchUpdate",
    "WeatherSnapshotData",
]
