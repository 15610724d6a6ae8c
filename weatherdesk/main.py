from __future__ import annotations

import contextlib
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from weatherdesk.api import api_router
from weatherdesk.config import settings
from weatherdesk.db import open_storage
from weatherdesk.domain import WeatherDeskError
from weatherdesk.services import HistoryStore, WeatherService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("weatherdesk")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the history storage for the life of the process."""

    storage = open_storage(settings.database_url, echo=settings.echo_sql)
    app.state.storage = storage
    app.state.history_store = HistoryStore(storage)
    app.state.weather_service = WeatherService()
    logger.info("Database initialized")

    if not settings.weather_api_key:
        logger.warning("Weather API key is missing; upstream lookups will be rejected")

    try:
        yield
    finally:
        storage.dispose()


app = FastAPI(title="WeatherDesk Backend", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


@app.exception_handler(WeatherDeskError)
async def handle_weatherdesk_error(request: Request, exc: WeatherDeskError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and path parameters are client errors, reported as 400."""

    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(status_code=400, content={"detail": "; ".join(messages)})


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    detail = "Internal server error"
    if settings.is_development:
        detail = f"{detail}: {exc}"
    return JSONResponse(status_code=500, content={"detail": detail})


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Basic root endpoint for quick verification."""

    return {"message": "WeatherDesk backend is running"}


def run() -> None:
    """Serve the app with uvicorn, reloading on code changes in development."""

    import uvicorn

    uvicorn.run(
        "weatherdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
