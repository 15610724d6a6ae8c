"""Fetch and normalize current conditions and forecasts for a location."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Optional

from weatherdesk.domain import ResolvedLocation, UpstreamUnavailable
from weatherdesk.models.weather import (
    Coordinates,
    ForecastDay,
    ForecastSample,
    WeatherObservation,
)
from weatherdesk.providers import OpenWeatherClient
from weatherdesk.services.forecast import bucket_forecast
from weatherdesk.services.units import (
    format_clock,
    meters_to_km,
    mps_to_kmh,
    offset_timezone,
    round_half_up,
)

logger = logging.getLogger("weatherdesk.weather_service")


class WeatherService:
    """Orchestrates upstream lookups into canonical weather records."""

    def __init__(self, client: Optional[OpenWeatherClient] = None) -> None:
        self.client = client or OpenWeatherClient()

    async def fetch_current(self, location: ResolvedLocation) -> WeatherObservation:
        """Return normalized current conditions.

        The UV index is a separate, best-effort lookup: if it fails for any
        reason the observation is still returned with ``uv_index = 0``.
        """

        payload = await self.client.current_conditions(location)
        try:
            coordinates = Coordinates(
                lat=payload["coord"]["lat"], lng=payload["coord"]["lon"]
            )
            fields = _normalize_current(payload)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.error("Unexpected current-conditions payload for %r: %s", location.raw, exc)
            raise UpstreamUnavailable() from exc

        uv_index = await self._uv_index_or_default(coordinates)
        observation = WeatherObservation(
            coordinates=coordinates, uv_index=uv_index, **fields
        )
        logger.debug("Current conditions normalized: %s", observation)
        return observation

    async def fetch_forecast(self, location: ResolvedLocation) -> list[ForecastSample]:
        """Return the raw 3-hour samples in upstream delivery order."""

        payload = await self.client.forecast(location)
        try:
            tz = offset_timezone(payload.get("city", {}).get("timezone"))
            return [
                ForecastSample(
                    timestamp=datetime.fromtimestamp(item["dt"], tz=tz),
                    temperature=item["main"]["temp"],
                    condition=item["weather"][0]["main"].lower(),
                )
                for item in payload["list"]
            ]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.error("Unexpected forecast payload for %r: %s", location.raw, exc)
            raise UpstreamUnavailable("Failed to fetch forecast data.") from exc

    async def forecast(self, location: ResolvedLocation) -> list[ForecastDay]:
        samples = await self.fetch_forecast(location)
        return bucket_forecast(samples)

    async def _uv_index_or_default(self, coordinates: Coordinates) -> int:
        try:
            payload = await self.client.uv_index(coordinates.lat, coordinates.lng)
            return round_half_up(payload["value"])
        except Exception as exc:
            logger.warning("UV data not available: %s", exc)
            return 0


def _normalize_current(payload: dict[str, Any]) -> dict[str, Any]:
    offset = payload.get("timezone")
    sys_block = payload["sys"]
    return {
        "location": f"{payload['name']}, {sys_block['country']}",
        "temperature": round_half_up(payload["main"]["temp"]),
        "condition": payload["weather"][0]["main"].lower(),
        "humidity": int(payload["main"]["humidity"]),
        "wind_speed": mps_to_kmh(payload["wind"]["speed"]),
        "visibility": meters_to_km(payload.get("visibility")),
        "sunrise": format_clock(sys_block["sunrise"], offset),
        "sunset": format_clock(sys_block["sunset"], offset),
    }


__all__ = ["WeatherService"]
