"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from datetime import datetime, timezone
import platform
import time

from fastapi import APIRouter


START_TIME = time.time()

router = APIRouter()


def health() -> dict:
    """Liveness payload: status, uptime in seconds, current timestamp."""
    return {
        "status": "ok",
        "uptime": time.time() - START_TIME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return health()


@router.get("/health/ready")
async def readiness_check():
    """
    Readiness check endpoint.

    Everything is in memory, so the service is ready as soon as it runs.
    """
    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": platform.python_version(),
        "checks": {
            "api": "ok",
            "repository": "ok",
        },
    }
