"""Social Graph API.

Provides a REST API over the friendship network queries.
"""

from social_graph.api.router import api_router

__all__ = ["api_router"]
