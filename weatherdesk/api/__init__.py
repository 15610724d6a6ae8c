"""API routers for the WeatherDesk backend."""

from fastapi import APIRouter

from .export import router as export_router
from .health import router as health_router
from .history import router as history_router
from .weather import router as weather_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(weather_router)
api_router.include_router(history_router)
api_router.include_router(export_router)

__all__ = ["api_router"]
