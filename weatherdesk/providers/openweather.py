"""OpenWeatherMap client for current conditions, UV index and forecasts."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from weatherdesk.config import settings
from weatherdesk.domain import LocationNotFound, UpstreamAuthError, UpstreamUnavailable
from weatherdesk.domain.location import ResolvedLocation

logger = logging.getLogger("weatherdesk.providers.openweather")


class OpenWeatherClient:
    """Fetch raw payloads from the OpenWeatherMap 2.5 API.

    Upstream failures are translated into the WeatherDesk error taxonomy:
    404 becomes ``LocationNotFound``, 401 becomes ``UpstreamAuthError`` and
    everything else (other statuses, timeouts, transport errors, bodies that
    are not JSON) becomes ``UpstreamUnavailable``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self.base_url = (base_url or settings.weather_base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.weather_api_key
        self.timeout = timeout or settings.weather_timeout

    async def current_conditions(self, location: ResolvedLocation) -> dict[str, Any]:
        return await self._get_json("weather", _location_params(location))

    async def uv_index(self, lat: float, lon: float) -> dict[str, Any]:
        return await self._get_json("uvi", {"lat": lat, "lon": lon})

    async def forecast(self, location: ResolvedLocation) -> dict[str, Any]:
        return await self._get_json("forecast", _location_params(location))

    async def _get_json(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{path}"
        query = {**params, "appid": self.api_key, "units": "metric"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=query)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error("Weather request to %s timed out: %s", path, exc)
            raise UpstreamUnavailable("Weather service timeout") from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error(
                "Weather service returned error: path=%s status=%s body=%s",
                path,
                status_code,
                exc.response.text,
            )
            if status_code == 404:
                raise LocationNotFound() from exc
            if status_code == 401:
                raise UpstreamAuthError() from exc
            raise UpstreamUnavailable() from exc
        except httpx.RequestError as exc:
            logger.error("Weather request to %s failed: %s", path, exc)
            raise UpstreamUnavailable() from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Weather service returned a non-JSON body for %s", path)
            raise UpstreamUnavailable() from exc

        if not isinstance(payload, dict):
            raise UpstreamUnavailable()
        return payload


def _location_params(location: ResolvedLocation) -> dict[str, Any]:
    if location.is_coordinates:
        return {"lat": location.lat, "lon": location.lon}
    return {"q": location.raw}


__all__ = ["OpenWeatherClient"]
