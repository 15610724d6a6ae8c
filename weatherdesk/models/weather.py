"""Weather observation and forecast models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from weatherdesk.models.base import CamelModel


class Coordinates(BaseModel):
    """Latitude/longitude pair as reported by the upstream provider."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")


class WeatherObservation(CamelModel):
    """Normalized current conditions for a location."""

    location: str = Field(..., description="Display name, e.g. 'Paris, FR'")
    temperature: int = Field(..., description="Air temperature in Celsius")
    condition: str = Field(..., description="Lower-cased primary weather category")
    humidity: int = Field(..., description="Relative humidity in percent")
    wind_speed: int = Field(..., description="Wind speed in km/h")
    visibility: int = Field(..., description="Visibility in kilometers")
    uv_index: int = Field(default=0, description="UV index, 0 when unavailable")
    sunrise: str = Field(..., description="Local sunrise time (hh:mm AM/PM)")
    sunset: str = Field(..., description="Local sunset time (hh:mm AM/PM)")
    coordinates: Coordinates = Field(..., description="Coordinates of the observation")


class ForecastSample(BaseModel):
    """One 3-hour interval sample from the forecast provider."""

    timestamp: datetime = Field(..., description="Sample time in the location's UTC offset")
    temperature: float = Field(..., description="Temperature in Celsius")
    condition: str = Field(..., description="Lower-cased primary weather category")


class ForecastDay(BaseModel):
    """Daily aggregate derived from forecast samples."""

    date: str = Field(..., description="Day label, e.g. 'Mon, Jan 1'")
    high: int = Field(..., description="Highest temperature of the day in Celsius")
    low: int = Field(..., description="Lowest temperature of the day in Celsius")
    condition: str = Field(..., description="Representative condition for the day")


__all__ = ["Coordinates", "ForecastDay", "ForecastSample", "WeatherObservation"]
