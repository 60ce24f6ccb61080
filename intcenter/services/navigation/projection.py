"""
Projections of a category grouping onto the UI surfaces.

Each projection is a pure function of the grouping (and, for the hero, the
category records). None of them truncate lists; render-time limits such as
"first 6 footer categories" belong to the templates.
"""

from collections.abc import Iterable, Sequence

from intcenter.models import (
    CategoryRecord,
    DataStatus,
    FooterCategory,
    FooterItem,
    HeroService,
    HeroServicesData,
    NavigationCategory,
    NavItem,
    ServicesPageCategory,
    ServicesPageItem,
)

from .grouping import (
    FOOTER_CATEGORY_ORDER,
    NAVIGATION_CATEGORY_ORDER,
    OTHER_SERVICES,
    CategoryBucket,
    CategoryGrouping,
)

FEATURED_PLACEHOLDER_1 = "Featured Category 1"
FEATURED_PLACEHOLDER_2 = "Featured Category 2"
HERO_SERVICES_PER_CATEGORY = 4
DEFAULT_SERVICE_DURATION = "45-90 minutes"

CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "Primary Care": "Comprehensive primary care and preventive health services",
    "Primary Care Services": "Comprehensive primary care and preventive health services",
    "Regenerative Medicine": "Advanced cellular and biological treatments for healing and recovery",
    "Regenerative Therapies": "Advanced cellular and biological treatments for healing and recovery",
    "Pain Management": "Comprehensive solutions for chronic and acute pain relief",
    "Wellness & Prevention": "Preventive care and overall health optimization services",
    "Diagnostics": "Advanced diagnostic testing and health assessments",
    "Specialized Care": "Targeted treatments for specific health conditions",
    OTHER_SERVICES: "Additional healthcare services and treatments",
}


def _describe(bucket: CategoryBucket) -> str:
    if bucket.name in CATEGORY_DESCRIPTIONS:
        return CATEGORY_DESCRIPTIONS[bucket.name]
    if bucket.category is not None and bucket.category.description:
        return bucket.category.description
    return ""


def project_navigation(
    grouping: CategoryGrouping,
    order: Sequence[str] = NAVIGATION_CATEGORY_ORDER,
) -> list[NavigationCategory]:
    """Dropdown menu: every category with all of its services."""
    return [
        NavigationCategory(
            title=bucket.name,
            description=_describe(bucket),
            items=[
                NavItem(
                    title=service.display_title,
                    url=service.url,
                    description=service.description or "",
                )
                for service in bucket.services
            ],
        )
        for bucket in grouping.ordered(order)
    ]


def project_footer(
    grouping: CategoryGrouping,
    order: Sequence[str] = FOOTER_CATEGORY_ORDER,
) -> list[FooterCategory]:
    """Footer link columns: name and link only."""
    return [
        FooterCategory(
            title=bucket.name,
            services=[FooterItem(name=service.display_title, href=service.url) for service in bucket.services],
        )
        for bucket in grouping.ordered(order)
    ]


def project_services_page(
    grouping: CategoryGrouping,
    order: Sequence[str] = FOOTER_CATEGORY_ORDER,
) -> list[ServicesPageCategory]:
    """Services page cards, carrying availability and delivery modes."""
    return [
        ServicesPageCategory(
            id=bucket.category.id if bucket.category is not None else None,
            title=bucket.name,
            description=(
                bucket.category.description or ""
                if bucket.category is not None
                else CATEGORY_DESCRIPTIONS.get(bucket.name, "")
            ),
            services=[
                ServicesPageItem(
                    name=service.display_title,
                    href=f"/services/{service.slug or ''}",
                    description=service.description or "",
                    duration=service.duration or DEFAULT_SERVICE_DURATION,
                    available=service.available,
                    featured=service.featured,
                    delivery_modes=list(service.delivery_modes),
                )
                for service in bucket.services
            ],
        )
        for bucket in grouping.ordered(order)
    ]


def _first_flagged(categories: Iterable[CategoryRecord], flag: str) -> CategoryRecord | None:
    # First match wins when the backend flags more than one category
    return next((category for category in categories if getattr(category, flag)), None)


def _hero_services(bucket: CategoryBucket | None, limit: int) -> list[HeroService]:
    if bucket is None:
        return []
    return [HeroService(title=service.display_title, url=service.url) for service in bucket.services[:limit]]


def project_hero(
    grouping: CategoryGrouping,
    categories: Sequence[CategoryRecord],
    limit: int = HERO_SERVICES_PER_CATEGORY,
) -> HeroServicesData:
    """Featured pair for the home page hero.

    Both slots stay empty with placeholder names unless a ``featured1`` and a
    ``featured2`` category both exist.
    """
    primary = _first_flagged(categories, "featured1")
    secondary = _first_flagged(categories, "featured2")

    if primary is None or secondary is None:
        return HeroServicesData(
            primary_category_name=FEATURED_PLACEHOLDER_1,
            secondary_category_name=FEATURED_PLACEHOLDER_2,
            status=DataStatus.EMPTY,
        )

    return HeroServicesData(
        primary_services=_hero_services(grouping.get(primary.name), limit),
        secondary_services=_hero_services(grouping.get(secondary.name), limit),
        primary_category_name=primary.name,
        secondary_category_name=secondary.name,
    )
