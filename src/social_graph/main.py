"""FastAPI application entry point for the Social Graph API.

This module creates and configures the FastAPI application with all
necessary middleware, routers, and lifecycle hooks.
"""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from social_graph import __version__
from social_graph.api.endpoints import network
from social_graph.api.router import api_router
from social_graph.config import get_settings
from social_graph.core.exceptions import (
    ConfigurationError,
    DatasetError,
    SocialGraphError,
)
from social_graph.utils.logging import LogContext, get_logger, setup_logging

logger = get_logger(__name__)

# Requests slower than this are logged as warnings (seconds)
_SLOW_REQUEST_THRESHOLD = 1.0


class PerformanceLoggingMiddleware(BaseHTTPMiddleware):
    """Time each request and tag its log lines with method and path.

    Graph queries logged while the request runs carry the same context, and
    the response gets an ``X-Response-Time`` header.
    """

    async def dispatch(self, request: Request, call_next):
        with LogContext(method=request.method, path=request.url.path):
            start_time = time.perf_counter()
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            duration_ms = round(duration * 1000, 2)
            if duration > _SLOW_REQUEST_THRESHOLD:
                logger.warning(
                    "Slow request", duration_ms=duration_ms, status_code=response.status_code
                )
            else:
                logger.debug(
                    "Request completed", duration_ms=duration_ms, status_code=response.status_code
                )

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Loads the configured dataset on startup. A dataset that fails to load
    leaves the network endpoints answering 503 until a reload succeeds.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control returns to the application.
    """
    settings = get_settings()
    setup_logging(settings.app)

    logger.info(
        "Starting Social Graph",
        version=__version__,
        environment=settings.app.env,
        dataset=str(settings.dataset.path),
    )

    try:
        network.set_analyzer(network.load_analyzer(settings))
    except DatasetError as e:
        logger.warning("Dataset failed to load", error=e.__class__.__name__, message=e.message)

    yield

    logger.info("Shutting down Social Graph")
    network.set_analyzer(None)

def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Social Graph API",
        description="Friend suggestions, degrees of separation, components and influence ranking",
        version=__version__,
        docs_url="/docs" if settings.app.debug else None,
        redoc_url="/redoc" if settings.app.debug else None,
        openapi_url="/openapi.json" if settings.app.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(PerformanceLoggingMiddleware)

    app.add_exception_handler(SocialGraphError, social_graph_exception_handler)

    app.include_router(api_router)

    return app


async def social_graph_exception_handler(
    request: Request,
    exc: SocialGraphError,
) -> JSONResponse:
    """Convert SocialGraphError instances to consistent JSON responses.

    Args:
        request: The incoming request.
        exc: The SocialGraphError exception.

    Returns:
        JSONResponse: Formatted error response.
    """
    logger.error(
        "Request failed",
        error=exc.__class__.__name__,
        message=exc.message,
        details=exc.details,
        path=request.url.path,
    )

    return JSONResponse(
        status_code=_get_status_code(exc),
        content=exc.to_dict(),
    )


def _get_status_code(exc: SocialGraphError) -> int:
    """Map exception types to HTTP status codes.

    Args:
        exc: The exception instance.

    Returns:
        int: Appropriate HTTP status code.
    """
    status_map: dict[type, int] = {
        DatasetError: status.HTTP_503_SERVICE_UNAVAILABLE,
        ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    for exc_type, status_code in status_map.items():
        if isinstance(exc, exc_type):
            return status_code

    return status.HTTP_500_INTERNAL_SERVER_ERROR


# Create the application instance
app = create_app()


def main() -> None:
    """Run the application using uvicorn.

    This is the entry point for the API server command.
    """
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "social_graph.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        workers=settings.api.workers if not settings.api.reload else 1,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    main()
