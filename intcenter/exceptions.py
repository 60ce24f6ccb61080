"""
Exceptions for the International Center website core.

This module provides the error taxonomy used by the REST client layer.
Every client failure is a ``RestError`` carrying the HTTP status it was
classified from; status ``0`` means no response was received at all.
"""

from typing import Any

RETRYABLE_STATUSES = frozenset({408, 429})


def is_retryable_status(status: int) -> bool:
    """Server errors, rate limiting and timeouts are presumed transient."""
    return status >= 500 or status in RETRYABLE_STATUSES


class IntCenterError(Exception):
    """Base exception for all package-specific errors."""

    pass


class ConfigError(IntCenterError):
    """Settings could not be loaded from the environment or TOML files."""

    pass


class RestError(IntCenterError):
    """Base exception for REST API errors."""

    def __init__(
        self,
        message: str,
        status: int,
        details: Any = None,
        correlation_id: str = "unknown",
    ) -> None:
        self.message = message
        self.status = status
        self.details = details
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return is_retryable_status(self.status)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, status={self.status}, "
            f"correlation_id={self.correlation_id!r})"
        )


class BadRequestError(RestError):
    """400 Bad Request."""

    pass


class UnauthorizedError(RestError):
    """401 Unauthorized."""

    pass


class ForbiddenError(RestError):
    """403 Forbidden."""

    pass


class NotFoundError(RestError):
    """404 Not Found."""

    pass


class RateLimitedError(RestError):
    """429 Too Many Requests."""

    pass


class ServerError(RestError):
    """500, 502, 503 or 504 from the server."""

    pass


class HttpError(RestError):
    """Any other non-success status."""

    pass


class RequestTimeoutError(RestError):
    """A single attempt exceeded the configured timeout (synthesized 408)."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Request timeout after {timeout:g}s", 408)
        self.timeout = timeout


class NetworkError(RestError):
    """No response was received (connection refused, DNS failure, ...)."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Network error: {message}", 0)


class ResponseFormatError(RestError):
    """A successful response whose body could not be understood."""

    pass
