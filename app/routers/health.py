# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Liveness says the process is up. Readiness touches everything a producer
# needs to get through a shoot day: the productions table, the schedule
# template catalog and the look image bucket.
# =============================================================================

from datetime import datetime, timezone
from typing import Callable

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.supabase_client import SupabaseClient

router = APIRouter()

API_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessResponse(BaseModel):
    """
    Readiness check response.

    Example:
        {
            "status": "degraded",
            "checks": {
                "productions": "healthy",
                "schedule_templates": "healthy",
                "look_images": "unhealthy: Bucket not found"
            },
            "timestamp": "2025-03-07T06:00:00+00:00"
        }
    """
    status: str
    checks: dict[str, str]
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _probe_table(table: str) -> Callable[[], None]:
    def probe() -> None:
        SupabaseClient.get_client().table(table).select("id").limit(1).execute()
    return probe


def _probe_image_bucket() -> None:
    SupabaseClient.get_client().storage.get_bucket(settings.LOOK_IMAGES_BUCKET)


READINESS_CHECKS: dict[str, Callable[[], None]] = {
    "productions": _probe_table("productions"),
    "schedule_templates": _probe_table("schedule_templates"),
    "look_images": _probe_image_bucket,
}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Process is up and serving requests."""
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Run every readiness check.

    Status is "ready" only if all of them pass, otherwise "degraded" with
    the first part of each error.
    """
    checks = {}
    for name, probe in READINESS_CHECKS.items():
        try:
            probe()
            checks[name] = "healthy"
        except Exception as e:
            checks[name] = f"unhealthy: {str(e)[:50]}"

    ready = all(result == "healthy" for result in checks.values())
    return ReadinessResponse(
        status="ready" if ready else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live")
async def liveness_check():
    return {"status": "alive", "timestamp": _now()}
