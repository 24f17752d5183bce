"""Main API router aggregating all endpoint routers."""

from fastapi import APIRouter

from social_graph.api.endpoints import health, network

# Create main API router with version prefix
api_router = APIRouter(prefix="/api/v1")

# Include endpoint routers
api_router.include_router(health.router)
api_router.include_router(network.router, prefix="/network", tags=["Network"])
