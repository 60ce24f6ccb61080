"""Navigation data pipeline: grouping, projections and page loaders."""

from intcenter.services.navigation.breadcrumbs import get_breadcrumbs
from intcenter.services.navigation.grouping import (
    FOOTER_CATEGORY_ORDER,
    NAVIGATION_CATEGORY_ORDER,
    OTHER_SERVICES,
    CategoryBucket,
    CategoryGrouping,
    group_services,
)
from intcenter.services.navigation.loader import (
    load_hero_services_data,
    load_navigation_data,
    load_services_page_data,
)
from intcenter.services.navigation.menu import MenuEvent, MenuState, ScrollLock, transition
from intcenter.services.navigation.projection import (
    project_footer,
    project_hero,
    project_navigation,
    project_services_page,
)

__all__ = [
    "FOOTER_CATEGORY_ORDER",
    "NAVIGATION_CATEGORY_ORDER",
    "OTHER_SERVICES",
    "CategoryBucket",
    "CategoryGrouping",
    "MenuEvent",
    "MenuState",
    "ScrollLock",
    "get_breadcrumbs",
    "group_services",
    "load_hero_services_data",
    "load_navigation_data",
    "load_services_page_data",
    "project_footer",
    "project_hero",
    "project_navigation",
    "project_services_page",
    "transition",
]
