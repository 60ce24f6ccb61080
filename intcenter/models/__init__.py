"""
Data models for the International Center website core.

Wire models mirror the public gateway's JSON envelopes; view models are the
shapes handed to the menu, footer, hero and services page.
"""

# Base models
from .base import CamelModel

# Navigation view models
from .navigation import (
    BreadcrumbItem,
    DataStatus,
    FooterCategory,
    FooterItem,
    HeroService,
    HeroServicesData,
    NavigationCategory,
    NavigationData,
    NavItem,
    ServicesPageCategory,
    ServicesPageData,
    ServicesPageItem,
)

# Services wire models
from .service import (
    CategoryRecord,
    CategoryRef,
    Pagination,
    ServiceRecord,
    ServiceStats,
    SingleRestResponse,
    StandardRestResponse,
)
