"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
import platform
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ordering.settings import AppSettings

from ordering_api.deps import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: AppSettings = Depends(get_settings)) -> dict:
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "order-service",
        "version": settings.api_version,
        "python_version": platform.python_version(),
    }
