"""Tests for ServicesRestClient endpoints and payload validation."""

import httpx
import pytest

from intcenter.clients import ServicesRestClient
from intcenter.exceptions import NotFoundError, ResponseFormatError
from intcenter.models import CategoryRecord, ServiceRecord
from intcenter.settings import Environment, Settings

from .conftest import GatewayStub, envelope

SERVICE_PAYLOAD = {
    "id": 7,
    "title": "PRP Therapy",
    "slug": "prp-therapy",
    "description": "Platelet-rich plasma",
    "categoryId": "regen",
    "featured": True,
    "deliveryModes": ["in-person"],
}


@pytest.mark.asyncio
class TestGetServices:
    async def test_query_parameters(self, services_client: ServicesRestClient, gateway: GatewayStub) -> None:
        gateway.routes["/services"] = envelope([SERVICE_PAYLOAD])

        response = await services_client.get_services(page_size=4, category="primary-care", featured=True)

        request = gateway.requests[0]
        assert request.url.path == "/services"
        assert dict(request.url.params) == {"pageSize": "4", "category": "primary-care", "featured": "true"}
        assert response.success is True
        assert response.data == [ServiceRecord.model_validate(SERVICE_PAYLOAD)]

    async def test_unset_parameters_are_not_sent(
        self, services_client: ServicesRestClient, gateway: GatewayStub
    ) -> None:
        gateway.routes["/services"] = envelope([])

        await services_client.get_services()

        assert gateway.requests[0].url.query == b""

    async def test_snake_case_payload_accepted(
        self, services_client: ServicesRestClient, gateway: GatewayStub
    ) -> None:
        gateway.routes["/services"] = envelope(
            [{"id": 1, "title": "Labs", "category_id": 3, "delivery_modes": None, "featured": None}]
        )

        service = (await services_client.get_services()).data[0]

        assert service.category_id == 3
        assert service.delivery_modes == []
        assert service.featured is False

    async def test_pagination_parsed(self, services_client: ServicesRestClient, gateway: GatewayStub) -> None:
        gateway.routes["/services"] = httpx.Response(
            200,
            json={
                "data": [],
                "success": True,
                "pagination": {"page": 2, "pageSize": 10, "total": 25, "totalPages": 3},
            },
        )

        response = await services_client.get_services(page=2, page_size=10)

        assert response.pagination is not None
        assert response.pagination.total_pages == 3

    async def test_unexpected_payload_raises_format_error(
        self, services_client: ServicesRestClient, gateway: GatewayStub
    ) -> None:
        gateway.routes["/services"] = httpx.Response(200, text="<html>maintenance</html>")

        with pytest.raises(ResponseFormatError):
            await services_client.get_services()


@pytest.mark.asyncio
class TestOtherEndpoints:
    async def test_categories(self, services_client: ServicesRestClient, gateway: GatewayStub) -> None:
        gateway.routes["/services/categories"] = envelope(
            [{"id": "regen", "name": "Regenerative Medicine", "slug": "regenerative-medicine", "featured2": True}]
        )

        response = await services_client.get_service_categories()

        assert response.data == [
            CategoryRecord(id="regen", name="Regenerative Medicine", slug="regenerative-medicine", featured2=True)
        ]

    async def test_service_by_slug_is_encoded(
        self, services_client: ServicesRestClient, gateway: GatewayStub
    ) -> None:
        gateway.routes["/services/iv therapy"] = envelope(SERVICE_PAYLOAD)

        response = await services_client.get_service_by_slug("iv therapy")

        assert gateway.requests[0].url.raw_path == b"/services/iv%20therapy"
        assert response.data is not None
        assert response.data.slug == "prp-therapy"

    async def test_service_by_slug_requires_slug(self, services_client: ServicesRestClient) -> None:
        with pytest.raises(ValueError):
            await services_client.get_service_by_slug("")

    async def test_missing_service_is_not_found(self, services_client: ServicesRestClient) -> None:
        with pytest.raises(NotFoundError):
            await services_client.get_service_by_slug("does-not-exist")

    async def test_featured_limit(self, services_client: ServicesRestClient, gateway: GatewayStub) -> None:
        gateway.routes["/services/featured"] = envelope([SERVICE_PAYLOAD])

        await services_client.get_featured_services(limit=3)

        assert dict(gateway.requests[0].url.params) == {"limit": "3"}

    async def test_search(self, services_client: ServicesRestClient, gateway: GatewayStub) -> None:
        gateway.routes["/services/search"] = envelope([])

        await services_client.search_services("knee pain", page_size=5, sort_by="title")

        assert dict(gateway.requests[0].url.params) == {"q": "knee pain", "pageSize": "5", "sortBy": "title"}

    async def test_stats(self, services_client: ServicesRestClient, gateway: GatewayStub) -> None:
        gateway.routes["/services/stats"] = envelope(
            {"totalServices": 12, "totalCategories": 4, "featuredServices": 3}
        )

        response = await services_client.get_service_stats()

        assert response.data is not None
        assert response.data.total_services == 12


@pytest.mark.asyncio
async def test_from_settings_uses_gateway_configuration() -> None:
    settings = Settings(
        environment="Staging",
        services_timeout=2.5,
        services_retry_attempts=5,
    )

    async with ServicesRestClient.from_settings(settings) as client:
        assert settings.environment is Environment.STAGING
        assert client.base_url == "https://api-staging.internationalcenter.com"
        assert client.timeout == 2.5
        assert client.retry_attempts == 5
