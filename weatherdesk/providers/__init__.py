"""Upstream weather providers for WeatherDesk."""

from .openweather import OpenWeatherClient

__all__ = ["OpenWeatherClient"]
