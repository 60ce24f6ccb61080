"""Shared fixtures: mock gateway transports and a recording sleep."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from intcenter.clients import RestClient, ServicesRestClient

BASE_URL = "http://gateway.test"


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that records delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class GatewayStub:
    """Mock transport handler that serves canned responses per path.

    Each route maps a path to either a response, a list of responses served
    in order (the last one repeats), or a callable taking the request.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = routes or {}
        self.requests: list[httpx.Request] = []

    def calls(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": f"no route for {request.url.path}"})
        if callable(route):
            return route(request)
        if isinstance(route, list):
            served = len(self.calls(request.url.path)) - 1
            return _fresh(route[min(served, len(route) - 1)])
        return _fresh(route)


def _fresh(template: httpx.Response) -> httpx.Response:
    """A new response per request, so one template can be served repeatedly."""
    return httpx.Response(template.status_code, headers=template.headers, content=template.content)


def envelope(data: Any, success: bool = True, message: str | None = None) -> httpx.Response:
    body: dict[str, Any] = {"data": data, "success": success}
    if message is not None:
        body["message"] = message
    return httpx.Response(200, json=body)


@pytest.fixture
def sleeper() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def gateway() -> GatewayStub:
    return GatewayStub()


@pytest.fixture
def make_client(sleeper: RecordingSleep) -> Callable[..., RestClient]:
    """Factory for clients wired to a mock transport and the recording sleep."""

    def factory(
        handler: Callable[[httpx.Request], Any],
        cls: type[RestClient] = RestClient,
        retry_attempts: int = 3,
        timeout: float = 1.0,
    ) -> RestClient:
        return cls(
            BASE_URL,
            timeout=timeout,
            retry_attempts=retry_attempts,
            transport=httpx.MockTransport(handler),
            sleep=sleeper,
        )

    return factory


@pytest_asyncio.fixture
async def services_client(
    make_client: Callable[..., RestClient], gateway: GatewayStub
) -> AsyncGenerator[ServicesRestClient, None]:
    client = make_client(gateway, cls=ServicesRestClient)
    assert isinstance(client, ServicesRestClient)
    yield client
    await client.close()
