"""
Loaders feeding the layout, home page and services page.

Loaders never raise client errors. A failed fetch is reported as
``DataStatus.DEGRADED`` with empty lists, so the UI can tell "backend
unreachable" apart from "no services exist" (``DataStatus.EMPTY``).
"""

import asyncio

from intcenter.clients import ServicesRestClient
from intcenter.exceptions import RestError
from intcenter.models import (
    CategoryRecord,
    DataStatus,
    HeroServicesData,
    NavigationData,
    ServiceRecord,
    ServicesPageData,
    StandardRestResponse,
)
from intcenter.utils.logger import logger

from .grouping import group_services
from .projection import (
    FEATURED_PLACEHOLDER_1,
    FEATURED_PLACEHOLDER_2,
    project_footer,
    project_hero,
    project_navigation,
    project_services_page,
)

SERVICES_PAGE_SIZE = 100


async def _fetch_catalog(
    client: ServicesRestClient,
) -> tuple[StandardRestResponse[ServiceRecord], StandardRestResponse[CategoryRecord]]:
    # A failed fetch cancels its sibling before the loader returns
    try:
        async with asyncio.TaskGroup() as group:
            services = group.create_task(client.get_services(page_size=SERVICES_PAGE_SIZE))
            categories = group.create_task(client.get_service_categories())
    except ExceptionGroup as e:
        failures, unexpected = e.split(RestError)
        if failures is None or unexpected is not None:
            raise
        raise failures.exceptions[0] from None
    return services.result(), categories.result()


def _empty_hero(status: DataStatus, error: str | None = None) -> HeroServicesData:
    return HeroServicesData(
        primary_category_name=FEATURED_PLACEHOLDER_1,
        secondary_category_name=FEATURED_PLACEHOLDER_2,
        status=status,
        error=error,
    )


async def load_navigation_data(client: ServicesRestClient) -> NavigationData:
    """Load navigation menu and footer categories."""
    logger.info("Loading navigation data")
    try:
        services, categories = await _fetch_catalog(client)
    except RestError as e:
        logger.error(f"Failed to load navigation data: {e.message}")
        return NavigationData(status=DataStatus.DEGRADED, error=e.message)

    if not services.data:
        logger.warning("No services returned, navigation will show empty state")
        return NavigationData(status=DataStatus.EMPTY)

    logger.info(f"Loaded {len(services.data)} services and {len(categories.data)} categories for navigation")
    grouping = group_services(services.data, categories.data)
    return NavigationData(
        navigation_categories=project_navigation(grouping),
        footer_categories=project_footer(grouping),
    )


async def load_hero_services_data(client: ServicesRestClient) -> HeroServicesData:
    """Load the featured category pair for the home page hero."""
    logger.info("Loading hero services data")
    try:
        services, categories = await _fetch_catalog(client)
    except RestError as e:
        logger.error(f"Failed to load hero services data: {e.message}")
        return _empty_hero(DataStatus.DEGRADED, e.message)

    if not categories.data:
        logger.warning("No categories returned, hero will show empty state")
        return _empty_hero(DataStatus.EMPTY)

    hero = project_hero(group_services(services.data, categories.data), categories.data)
    if hero.status == DataStatus.EMPTY:
        logger.warning("No featured category pair found, hero will show placeholders")
        return hero

    logger.info(
        f"Hero services loaded: {len(hero.primary_services)} from {hero.primary_category_name}, "
        f"{len(hero.secondary_services)} from {hero.secondary_category_name}"
    )
    return hero


async def load_services_page_data(client: ServicesRestClient) -> ServicesPageData:
    """Load every category with its services for the services page."""
    logger.info("Loading services page data")
    try:
        services, categories = await _fetch_catalog(client)
    except RestError as e:
        logger.error(f"Failed to load services page data: {e.message}")
        return ServicesPageData(status=DataStatus.DEGRADED, error=e.message)

    for name, envelope in (("Services", services), ("Categories", categories)):
        if not envelope.success:
            message = envelope.message or f"{name} request was not successful"
            logger.error(f"{name} API request failed: {message}")
            return ServicesPageData(status=DataStatus.DEGRADED, error=message)

    if not services.data:
        logger.warning("No services returned from API")
        return ServicesPageData(status=DataStatus.EMPTY)

    service_categories = project_services_page(group_services(services.data, categories.data))
    logger.info(f"Organized {len(services.data)} services into {len(service_categories)} categories")
    return ServicesPageData(service_categories=service_categories)
