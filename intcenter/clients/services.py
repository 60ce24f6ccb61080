"""REST client for the services domain of the public gateway."""

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from intcenter.clients.rest import RestClient
from intcenter.exceptions import ResponseFormatError
from intcenter.models import (
    CategoryRecord,
    ServiceRecord,
    ServiceStats,
    SingleRestResponse,
    StandardRestResponse,
)
from intcenter.settings import Settings, get_settings

M = TypeVar("M", bound=BaseModel)


def _query(**params: Any) -> dict[str, str]:
    """Drop unset parameters and render the rest the way the gateway expects."""
    query: dict[str, str] = {}
    for name, value in params.items():
        if value is None or value == "":
            continue
        query[name] = str(value).lower() if isinstance(value, bool) else str(value)
    return query


class ServicesRestClient(RestClient):
    """Client for the services endpoints of the public gateway.

    Example:
        ```python
        async with ServicesRestClient.from_settings() as client:
            services = await client.get_services(page_size=100)
            categories = await client.get_service_categories()
        ```
    """

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ServicesRestClient":
        """Build a client from the gateway settings of the current environment."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.api_base_url,
            timeout=settings.services_timeout,
            retry_attempts=settings.services_retry_attempts,
            transport=transport,
        )

    async def _get(self, endpoint: str, model: type[M], params: dict[str, str] | None = None) -> M:
        payload = await self.request(endpoint, params=params or None)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(
                f"Unexpected response from {endpoint}: {e.error_count()} validation error(s)",
                200,
                details=e.errors(include_url=False),
            ) from e

    async def get_services(
        self,
        page: int | None = None,
        page_size: int | None = None,
        category: str | None = None,
        featured: bool | None = None,
        status: str | None = None,
    ) -> StandardRestResponse[ServiceRecord]:
        """Get a page of services.

        Args:
            page: Page number
            page_size: Services per page
            category: Category slug to filter on
            featured: Only featured (or only non-featured) services
            status: Publication status filter

        Returns:
            List envelope of services
        """
        params = _query(page=page, pageSize=page_size, category=category, featured=featured, status=status)
        return await self._get("/services", StandardRestResponse[ServiceRecord], params)

    async def get_service_by_slug(self, slug: str) -> SingleRestResponse[ServiceRecord]:
        """Get a single service by slug.

        Raises:
            ValueError: If slug is empty
        """
        if not slug:
            raise ValueError("Service slug is required")
        return await self._get(f"/services/{quote(slug, safe='')}", SingleRestResponse[ServiceRecord])

    async def get_service_categories(self) -> StandardRestResponse[CategoryRecord]:
        """Get all service categories."""
        return await self._get("/services/categories", StandardRestResponse[CategoryRecord])

    async def get_featured_services(self, limit: int | None = None) -> StandardRestResponse[ServiceRecord]:
        """Get featured services, optionally capped at ``limit``."""
        return await self._get(
            "/services/featured", StandardRestResponse[ServiceRecord], _query(limit=limit)
        )

    async def search_services(
        self,
        q: str,
        page: int | None = None,
        page_size: int | None = None,
        category: str | None = None,
        sort_by: str | None = None,
    ) -> StandardRestResponse[ServiceRecord]:
        """Full-text search over services."""
        params = {"q": q, **_query(page=page, pageSize=page_size, category=category, sortBy=sort_by)}
        return await self._get("/services/search", StandardRestResponse[ServiceRecord], params)

    async def get_service_stats(self) -> SingleRestResponse[ServiceStats]:
        return await self._get("/services/stats", SingleRestResponse[ServiceStats])
