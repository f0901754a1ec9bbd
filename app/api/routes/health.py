"""Health routes - Liveness check for the load balancer."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.api.deps import get_settings
from app.core.config import Settings
from app.schemas.api import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint for load balancer and container health checks.

    Reports whether Airtable credentials are present. Never calls Airtable,
    so an upstream outage does not take the instance out of rotation.
    """
    return HealthResponse(
        status="healthy",
        airtable_configured=settings.airtable_configured,
        timestamp=datetime.now(timezone.utc),
    )
