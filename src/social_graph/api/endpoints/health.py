"""Health check endpoints for the Social Graph API.

Provides endpoints for monitoring application health and readiness.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel

from social_graph import __version__
from social_graph.api.endpoints import network
from social_graph.config import get_settings

router = APIRouter(tags=["Health"])


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str
    timestamp: str


class DetailedHealthStatus(BaseModel):
    """Detailed health check with component status."""

    status: str
    version: str
    environment: str
    timestamp: str
    components: dict[str, dict[str, Any]]


@router.get(
    "/health",
    response_model=HealthStatus,
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
    description="Returns basic health status of the application.",
)
async def health_check() -> HealthStatus:
    """Check if the application is running.

    Returns:
        HealthStatus: Basic health information.
    """
    settings = get_settings()
    return HealthStatus(
        status="healthy",
        version=__version__,
        environment=settings.app.env,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get(
    "/health/ready",
    response_model=DetailedHealthStatus,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Checks whether a network has been loaded.",
)
async def readiness_check() -> DetailedHealthStatus:
    """Check if the friendship graph is loaded and queryable.

    Returns:
        DetailedHealthStatus: Detailed health status with component checks.
    """
    settings = get_settings()
    analyzer = network.current_analyzer()

    if analyzer is None:
        graph_status: dict[str, Any] = {"status": "unhealthy", "error": "Network not loaded"}
    else:
        graph_status = {
            "status": "healthy",
            "user_count": analyzer.store.user_count,
            "edge_count": analyzer.store.edge_count,
        }

    components = {"graph": graph_status}
    all_healthy = all(c.get("status") == "healthy" for c in components.values())

    return DetailedHealthStatus(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        environment=settings.app.env,
        timestamp=datetime.now(timezone.utc).isoformat(),
        components=components,
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
    description="Simple check to verify the application process is running.",
)
async def liveness_check() -> dict[str, str]:
    """Check if the application process is alive.

    Returns:
        dict: Simple alive status.
    """
    return {"status": "alive"}
