"""Wire models for the services domain of the public gateway."""

from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator

from .base import CamelModel

T = TypeVar("T")

UNKNOWN_SERVICE_TITLE = "Unknown Service"


class CategoryRef(CamelModel):
    """Category embedded inline on a service record."""

    id: int | str | None = None
    name: str | None = None


class ServiceRecord(CamelModel):
    """A clinic service as returned by the gateway."""

    id: int | str
    title: str | None = None
    slug: str | None = None
    description: str | None = None
    category_id: int | str | None = None
    category: CategoryRef | None = None
    featured: bool = False
    delivery_modes: list[str] = Field(default_factory=list)
    duration: str | None = None
    available: bool = False

    @field_validator("delivery_modes", mode="before")
    @classmethod
    def _coerce_delivery_modes(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    @field_validator("featured", "available", mode="before")
    @classmethod
    def _coerce_null_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def display_title(self) -> str:
        return self.title or UNKNOWN_SERVICE_TITLE

    @property
    def url(self) -> str:
        return f"/services/{self.slug or 'unknown'}"


class CategoryRecord(CamelModel):
    """A service category as returned by the gateway."""

    id: int | str
    name: str
    slug: str = ""
    description: str | None = None
    featured1: bool = False
    featured2: bool = False
    display_order: int = 0
    active: bool = True


class Pagination(CamelModel):
    page: int
    page_size: int
    total: int
    total_pages: int


class StandardRestResponse(CamelModel, Generic[T]):
    """List envelope: ``{data: [...], success, message?, errors?}``."""

    data: list[T] = Field(default_factory=list)
    success: bool = True
    message: str | None = None
    errors: list[str] | None = None
    pagination: Pagination | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_null_data(cls, value: Any) -> Any:
        return [] if value is None else value


class SingleRestResponse(CamelModel, Generic[T]):
    """Single-item envelope: ``{data, success, message?, errors?}``."""

    data: T | None = None
    success: bool = True
    message: str | None = None
    errors: list[str] | None = None


class ServiceStats(CamelModel):
    total_services: int = 0
    total_categories: int = 0
    featured_services: int = 0
