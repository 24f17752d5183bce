"""API endpoints module.

Contains all REST API endpoint routers.
"""

from social_graph.api.endpoints import health, network

__all__ = [
    "health",
    "network",
]
