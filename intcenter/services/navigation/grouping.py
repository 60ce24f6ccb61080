"""
Grouping of services into category buckets.

Every service lands in exactly one bucket: the category its ``category_id``
points at, else its inline category name, else ``"Other Services"``.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from intcenter.models import CategoryRecord, ServiceRecord

OTHER_SERVICES = "Other Services"

NAVIGATION_CATEGORY_ORDER: tuple[str, ...] = (
    "Primary Care",
    "Primary Care Services",
    "Regenerative Medicine",
    "Regenerative Therapies",
    "Pain Management",
    "Diagnostics",
    "Wellness & Prevention",
    "Specialized Care",
    OTHER_SERVICES,
)

FOOTER_CATEGORY_ORDER: tuple[str, ...] = (
    "Primary Care",
    "Regenerative Medicine",
    "Pain Management",
    "Diagnostics",
    "Specialized Care",
    OTHER_SERVICES,
)


def display_sort_key(text: str) -> tuple[str, str]:
    """Locale-style ordering: case-insensitive, lowercase first on ties."""
    return text.casefold(), text.swapcase()


def service_sort_key(service: ServiceRecord) -> tuple[bool, tuple[str, str]]:
    """Featured services first, then alphabetical by display title."""
    return not service.featured, display_sort_key(service.display_title)


@dataclass(frozen=True, slots=True)
class CategoryBucket:
    """Services of one category, already sorted for display."""

    name: str
    services: tuple[ServiceRecord, ...]
    category: CategoryRecord | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.services)


@dataclass(frozen=True, slots=True)
class CategoryGrouping:
    """Non-empty buckets keyed by category name, in first-seen order."""

    buckets: dict[str, CategoryBucket]

    def ordered(self, preferred: Sequence[str] = NAVIGATION_CATEGORY_ORDER) -> list[CategoryBucket]:
        """Buckets in ``preferred`` order, unlisted ones after, alphabetically."""
        rank = {name: index for index, name in enumerate(preferred)}

        def key(bucket: CategoryBucket) -> tuple[int, int, tuple[str, str]]:
            if bucket.name in rank:
                return 0, rank[bucket.name], ("", "")
            return 1, 0, display_sort_key(bucket.name)

        return sorted(self.buckets.values(), key=key)

    def get(self, name: str) -> CategoryBucket | None:
        return self.buckets.get(name)

    def __len__(self) -> int:
        return len(self.buckets)


def _id_key(value: int | str | None) -> str | None:
    return None if value is None or value == "" else str(value)


def resolve_category_name(service: ServiceRecord, names_by_id: dict[str, str]) -> str:
    """Pick the bucket name for a single service."""
    category_id = _id_key(service.category_id)
    if category_id is not None and category_id in names_by_id:
        return names_by_id[category_id]
    if service.category is not None and service.category.name:
        return service.category.name
    return OTHER_SERVICES


def group_services(
    services: Iterable[ServiceRecord],
    categories: Iterable[CategoryRecord],
) -> CategoryGrouping:
    """Partition services into sorted, non-empty category buckets.

    Args:
        services: Flat list of services
        categories: Known categories, used to resolve ``category_id``

    Returns:
        Grouping of the services; the inputs are left untouched
    """
    names_by_id: dict[str, str] = {}
    records_by_name: dict[str, CategoryRecord] = {}
    members: dict[str, list[ServiceRecord]] = {}

    for category in categories:
        names_by_id[str(category.id)] = category.name
        records_by_name.setdefault(category.name, category)
        members.setdefault(category.name, [])
    members.setdefault(OTHER_SERVICES, [])

    for service in services:
        members.setdefault(resolve_category_name(service, names_by_id), []).append(service)

    return CategoryGrouping(
        buckets={
            name: CategoryBucket(
                name=name,
                services=tuple(sorted(bucket, key=service_sort_key)),
                category=records_by_name.get(name),
            )
            for name, bucket in members.items()
            if bucket
        }
    )
