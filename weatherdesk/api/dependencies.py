"""FastAPI dependencies resolving the services owned by the application."""

from __future__ import annotations

from fastapi import Request

from weatherdesk.services import HistoryStore, WeatherService


def get_history_store(request: Request) -> HistoryStore:
    return request.app.state.history_store


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service
