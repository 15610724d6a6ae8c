"""Current conditions and forecast endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from weatherdesk.api.dependencies import get_weather_service
from weatherdesk.domain import resolve_location
from weatherdesk.models import ForecastDay, WeatherObservation
from weatherdesk.services import WeatherService

router = APIRouter(prefix="/api/weather", tags=["weather"])

logger = logging.getLogger("weatherdesk.api.weather")


@router.get(
    "/current/{location}",
    response_model=WeatherObservation,
    summary="Current conditions for a place name or 'lat,lon'",
)
async def get_current_weather(
    location: str, service: WeatherService = Depends(get_weather_service)
) -> WeatherObservation:
    resolved = resolve_location(location)
    logger.info("Current weather lookup: %s (%s)", location, resolved.kind.value)
    return await service.fetch_current(resolved)


@router.get(
    "/forecast/{location}",
    response_model=list[ForecastDay],
    summary="5-day forecast summary for a place name or 'lat,lon'",
)
async def get_forecast(
    location: str, service: WeatherService = Depends(get_weather_service)
) -> list[ForecastDay]:
    resolved = resolve_location(location)
    logger.info("Forecast lookup: %s (%s)", location, resolved.kind.value)
    return await service.forecast(resolved)
