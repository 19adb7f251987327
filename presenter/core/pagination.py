"""Pagination helpers.

``Presenter.pagination`` accepts anything satisfying the ``Paginator``
protocol. ``Page`` is the length-aware implementation shipped with the
package; applications backed by an ORM or an API usually build one from a
count query plus a sliced query.
"""

import math
from collections.abc import Sequence
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, computed_field

from presenter.core.config import get_settings

T = TypeVar("T")

PAGINATOR_FIELDS = (
    "items",
    "current_page",
    "last_page",
    "per_page",
    "total",
    "first_item",
    "last_item",
    "path",
)


@runtime_checkable
class Paginator(Protocol):
    """One page of models plus its position within the full result set.

    ``first_item``/``last_item`` are the 1-based inclusive bounds of the
    page's items within the total set, or ``None`` for an empty page.
    ``path`` is the base URL without a query string.
    """

    items: Sequence[Any]
    current_page: int
    last_page: int
    per_page: int
    total: int
    first_item: int | None
    last_item: int | None
    path: str


def page_url(path: str, page: int, page_name: str | None = None) -> str:
    """Return ``path`` with the page query parameter appended."""
    name = page_name or get_settings().page_name
    return f"{path}?{name}={page}"


def paginate(page: int, per_page: int, max_per_page: int = 200) -> tuple[int, int]:
    """Clamp page/per_page; return (page, per_page)."""
    per_page = max(1, min(per_page, max_per_page))
    page = max(1, page)
    return page, per_page


class Page(BaseModel, Generic[T]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T]
    current_page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)
    total: int = Field(default=0, ge=0)
    path: str = "/"

    @computed_field
    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total / self.per_page), 1)

    @computed_field
    @property
    def first_item(self) -> int | None:
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + 1

    @computed_field
    @property
    def last_item(self) -> int | None:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1

    def url(self, page: int) -> str:
        return page_url(self.path, max(page, 1))

    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page

    @classmethod
    def from_sequence(
        cls,
        items: Sequence[T],
        page: int = 1,
        per_page: int = 15,
        path: str = "/",
        max_per_page: int = 200,
    ) -> "Page[T]":
        """Slice a fully loaded sequence down to the requested page."""
        page, per_page = paginate(page, per_page, max_per_page)
        offset = (page - 1) * per_page
        return cls(
            items=list(items[offset:offset + per_page]),
            current_page=page,
            per_page=per_page,
            total=len(items),
            path=path,
        )
