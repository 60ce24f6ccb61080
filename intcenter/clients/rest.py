"""
Retrying REST client for the public gateway.

This module provides the error classifier and a base async client that
applies a per-attempt timeout, classifies failures and retries transient
ones with exponential backoff.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Self

import httpx

from intcenter.exceptions import (
    BadRequestError,
    ForbiddenError,
    HttpError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    RequestTimeoutError,
    ResponseFormatError,
    RestError,
    ServerError,
    UnauthorizedError,
    is_retryable_status,
)
from intcenter.utils.logger import logger

DEFAULT_RETRY_ATTEMPTS = 3
RETRY_BASE_DELAY = 1.0
RETRY_MAX_DELAY = 5.0
HEALTH_PATH = "/health"

_ERROR_CLASSES: dict[int, tuple[type[RestError], str]] = {
    400: (BadRequestError, "Bad request"),
    401: (UnauthorizedError, "Unauthorized"),
    403: (ForbiddenError, "Access forbidden"),
    404: (NotFoundError, "Not found"),
    429: (RateLimitedError, "Rate limit exceeded"),
    500: (ServerError, "Server error"),
    502: (ServerError, "Server error"),
    503: (ServerError, "Server error"),
    504: (ServerError, "Server error"),
}


def classify_response(status: int, reason: str, details: dict[str, Any] | None = None) -> RestError:
    """Turn a non-success status and its parsed body into a typed error.

    Args:
        status: HTTP status code
        reason: Reason phrase, used when the body carries no message
        details: Parsed error body

    Returns:
        The error matching the status; ``HttpError`` for unlisted statuses
    """
    details = details or {}
    correlation_id = str(details.get("correlationId") or details.get("correlation_id") or "unknown")
    text = details.get("message") or reason

    error_cls, prefix = _ERROR_CLASSES.get(status, (HttpError, f"HTTP error {status}"))
    return error_cls(f"{prefix}: {text}", status, details, correlation_id)


def parse_error_response(response: httpx.Response) -> dict[str, Any]:
    """Best-effort decode of an error body."""
    try:
        if "application/json" in response.headers.get("content-type", ""):
            body = response.json()
            return body if isinstance(body, dict) else {"message": str(body)}
        return {"message": response.text}
    except (ValueError, UnicodeDecodeError):
        return {"message": response.reason_phrase}


def calculate_retry_delay(attempt: int) -> float:
    """Seconds to wait after a failed ``attempt`` (1-indexed): 1, 2, 4, capped at 5."""
    return min(RETRY_BASE_DELAY * 2 ** (attempt - 1), RETRY_MAX_DELAY)


class RestClient:
    """Async REST client with per-attempt timeout and retry.

    Non-success responses are classified into ``RestError`` subclasses.
    Server errors, rate limiting and timeouts are retried until
    ``retry_attempts`` requests have been made; every other failure,
    including connection errors, is raised on first occurrence.

    Example:
        ```python
        async with RestClient("http://localhost:7220", timeout=10.0) as client:
            payload = await client.request("/services?pageSize=4")
        ```

    Args:
        base_url: Base URL every request path is appended to.
        timeout: Timeout of a single attempt in seconds.
        retry_attempts: Total number of attempts per request.
        transport: Optional httpx transport (used by tests).
        sleep: Coroutine used to wait between attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float,
        retry_attempts: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_attempts = retry_attempts or DEFAULT_RETRY_ATTEMPTS
        if self.retry_attempts < 1:
            raise ValueError("retry_attempts must be at least 1")
        self._sleep = sleep
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def service_name(self) -> str:
        return type(self).__name__

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def _send(self, method: str, url: str, attempt: int, **kwargs: Any) -> httpx.Response:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Retry-Attempt": str(attempt),
            **(kwargs.pop("headers", None) or {}),
        }
        # Bounds the whole attempt, not just each socket operation
        return await asyncio.wait_for(
            self._client.request(method, url, headers=headers, **kwargs),
            timeout=self.timeout,
        )

    async def request(self, endpoint: str, method: str = "GET", **kwargs: Any) -> Any:
        """Make an HTTP request, retrying transient failures.

        Args:
            endpoint: Path appended to the base URL (e.g. ``/services``)
            method: HTTP method
            **kwargs: Additional arguments passed to ``httpx.AsyncClient.request``

        Returns:
            Decoded JSON for JSON responses, otherwise the raw text

        Raises:
            RestError: The classified failure of the last attempt
        """
        url = f"{self.base_url}{endpoint}"
        last_error: RestError | None = None

        for attempt in range(1, self.retry_attempts + 1):
            logger.debug(f"[REST] {method} {url} (attempt {attempt}/{self.retry_attempts})")
            try:
                response = await self._send(method, url, attempt, **kwargs)
            except (httpx.TimeoutException, TimeoutError):
                last_error = RequestTimeoutError(self.timeout)
            except httpx.RequestError as e:
                logger.error(f"[REST] {method} {url} failed: {e}")
                raise NetworkError(str(e) or type(e).__name__) from e
            else:
                if response.is_success:
                    return self._decode(response, method, endpoint)
                last_error = classify_response(
                    response.status_code,
                    response.reason_phrase,
                    parse_error_response(response),
                )

            if attempt < self.retry_attempts and is_retryable_status(last_error.status):
                delay = calculate_retry_delay(attempt)
                logger.warning(
                    f"[REST] Retrying {method} {endpoint} after {delay:g}s: {last_error.message}"
                )
                await self._sleep(delay)
                continue

            logger.error(f"[REST] {method} {endpoint} failed: {last_error.message}")
            raise last_error

        # Unreachable while retry_attempts >= 1
        raise last_error or RestError("All retry attempts failed", 0)

    def _decode(self, response: httpx.Response, method: str, endpoint: str) -> Any:
        if "application/json" in response.headers.get("content-type", ""):
            try:
                data = response.json()
            except ValueError as e:
                raise ResponseFormatError(
                    f"Malformed JSON response from {endpoint}", response.status_code
                ) from e
            logger.debug(f"[REST] {method} {endpoint} success")
            return data

        logger.debug(f"[REST] {method} {endpoint} success (non-JSON)")
        return response.text

    async def health_check(self) -> dict[str, str]:
        """Probe ``/health`` once, without retries.

        Returns:
            ``{"status": "healthy" | "unhealthy", "service": <client name>}``
        """
        healthy = False
        try:
            response = await self._send("GET", f"{self.base_url}{HEALTH_PATH}", attempt=1)
            if response.is_success:
                healthy = response.text == "Healthy"
            else:
                logger.warning(f"Health check failed: {response.status_code} {response.reason_phrase}")
        except (httpx.HTTPError, httpx.InvalidURL, TimeoutError) as e:
            logger.warning(f"Health check failed: {e!r}")

        return {
            "status": "healthy" if healthy else "unhealthy",
            "service": self.service_name,
        }
