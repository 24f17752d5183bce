"""Structured logging for Social Graph.

structlog renders colored console lines in development and JSON elsewhere.
Everything goes to stderr: the CLI prints query results on stdout.
"""

import logging
import sys
from collections.abc import Mapping
from contextvars import Token
from typing import Any

import structlog
from structlog.types import Processor

from social_graph.config import AppSettings, get_settings


def setup_logging(app_settings: AppSettings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        app_settings: Settings to configure from; defaults to the cached
            application settings.
    """
    app_settings = app_settings or get_settings().app

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if app_settings.env == "development":
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_level = getattr(logging, app_settings.log_level)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger().setLevel(log_level)

    # uvicorn's access log duplicates the request timing middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Loaded dataset", user_count=10)
    """
    return structlog.get_logger(name)


class LogContext:
    """Bind log context for the duration of a block.

    On exit the previous values are restored, so nested blocks that rebind
    the same key hand it back to the outer block.

    Example:
        >>> with LogContext(command="suggest", user="alice"):
        ...     logger.info("Running query")  # carries command and user
    """

    def __init__(self, **context: Any) -> None:
        self.context = context
        self._tokens: Mapping[str, Token[Any]] = {}

    def __enter__(self) -> "LogContext":
        self._tokens = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)
