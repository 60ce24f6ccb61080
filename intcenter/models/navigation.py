"""View models produced by the navigation projections and loaders."""

from enum import Enum

from pydantic import Field

from .base import CamelModel


class DataStatus(str, Enum):
    """Outcome of a loader call.

    ``EMPTY`` means the backend answered with no services; ``DEGRADED`` means
    the backend could not be reached or answered with an error.
    """

    OK = "ok"
    EMPTY = "empty"
    DEGRADED = "degraded"


class NavItem(CamelModel):
    title: str
    url: str
    description: str = ""


class FooterItem(CamelModel):
    name: str
    href: str


class HeroService(CamelModel):
    title: str
    url: str


class ServicesPageItem(CamelModel):
    name: str
    href: str
    description: str = ""
    duration: str
    available: bool = False
    featured: bool = False
    delivery_modes: list[str] = Field(default_factory=list)


class NavigationCategory(CamelModel):
    title: str
    description: str = ""
    items: list[NavItem] = Field(default_factory=list)


class FooterCategory(CamelModel):
    title: str
    services: list[FooterItem] = Field(default_factory=list)


class ServicesPageCategory(CamelModel):
    id: int | str | None = None
    title: str
    description: str = ""
    services: list[ServicesPageItem] = Field(default_factory=list)


class HeroServicesData(CamelModel):
    primary_services: list[HeroService] = Field(default_factory=list)
    secondary_services: list[HeroService] = Field(default_factory=list)
    primary_category_name: str
    secondary_category_name: str
    status: DataStatus = DataStatus.OK
    error: str | None = None


class NavigationData(CamelModel):
    navigation_categories: list[NavigationCategory] = Field(default_factory=list)
    footer_categories: list[FooterCategory] = Field(default_factory=list)
    status: DataStatus = DataStatus.OK
    error: str | None = None


class ServicesPageData(CamelModel):
    service_categories: list[ServicesPageCategory] = Field(default_factory=list)
    status: DataStatus = DataStatus.OK
    error: str | None = None


class BreadcrumbItem(CamelModel):
    label: str
    href: str
