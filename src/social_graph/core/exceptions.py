"""Custom exceptions for the Social Graph analyzer.

Query operations never raise for unknown users or disconnected pairs; these
exceptions cover configuration, dataset loading and store misuse.
"""

from typing import Any


class SocialGraphError(Exception):
    """Base exception for all Social Graph errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SocialGraphError):
    """Error in application configuration."""

    pass


# =============================================================================
# Dataset Errors
# =============================================================================


class DatasetError(SocialGraphError):
    """Base class for dataset loading errors."""

    pass


class DatasetNotFoundError(DatasetError):
    """Dataset file does not exist."""

    def __init__(self, path: str, cause: Exception | None = None) -> None:
        super().__init__(
            message=f"Dataset not found: {path}",
            details={"path": path},
            cause=cause,
        )


class DatasetReadError(DatasetError):
    """Dataset path exists but cannot be read, e.g. a directory or no permission."""

    def __init__(self, path: str, cause: Exception | None = None) -> None:
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else str(cause)
        super().__init__(
            message=f"Cannot read dataset {path}: {reason}",
            details={"path": path, "reason": reason},
            cause=cause,
        )


class DatasetDecodeError(DatasetError):
    """Dataset bytes are not valid in the configured encoding."""

    def __init__(self, path: str, encoding: str, cause: UnicodeDecodeError) -> None:
        super().__init__(
            message=f"Dataset {path} is not valid {encoding} at byte {cause.start}",
            details={"path": path, "encoding": encoding, "position": cause.start},
            cause=cause,
        )


class MalformedRecordError(DatasetError):
    """A dataset record could not be turned into edges."""

    def __init__(self, path: str, line: int, reason: str) -> None:
        super().__init__(
            message=f"Malformed record in {path} at line {line}: {reason}",
            details={"path": path, "line": line, "reason": reason},
        )


# =============================================================================
# Graph Errors
# =============================================================================


class GraphError(SocialGraphError):
    """Base class for graph-related errors."""

    pass


class GraphFrozenError(GraphError):
    """Mutation attempted on a store that finished loading."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            message=f"Graph is read-only; cannot {operation}",
            details={"operation": operation},
        )
