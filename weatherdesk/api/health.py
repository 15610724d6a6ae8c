"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from weatherdesk.config import settings

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", summary="Health check")
def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "env": settings.weatherdesk_env,
    }
