"""Breadcrumb trail for a page path."""

from intcenter.models import BreadcrumbItem


def segment_to_label(segment: str) -> str:
    """``patient-resources`` -> ``Patient Resources``."""
    return " ".join(word[:1].upper() + word[1:] for word in segment.split("-"))


def get_breadcrumbs(pathname: str) -> list[BreadcrumbItem]:
    breadcrumbs = [BreadcrumbItem(label="Home", href="/")]

    current_path = ""
    for segment in filter(None, pathname.split("/")):
        current_path += f"/{segment}"
        breadcrumbs.append(BreadcrumbItem(label=segment_to_label(segment), href=current_path))

    return breadcrumbs
