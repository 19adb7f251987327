"""Containers returned by ``Presenter.collection`` and ``Presenter.pagination``."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PresentedCollection(list):
    """Ordered presenters, one per input model."""

    def to_list(self) -> list[Any]:
        return [presenter.to_dict() for presenter in self]


class PageLinks(BaseModel):
    model_config = ConfigDict(strict=True)

    first: str
    last: str
    prev: str | None = None
    # An integer page number, unlike the URL strings above.
    next: int | None = None


class PageMeta(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    current_page: int
    from_: int | None = Field(default=None, alias="from")
    last_page: int
    path: str
    per_page: int
    to: int | None = None
    total: int


class PresentedPage(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: PresentedCollection
    links: PageLinks
    meta: PageMeta

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data.to_list(),
            "links": self.links.model_dump(),
            "meta": self.meta.model_dump(by_alias=True),
        }


def serialize(value: Any) -> Any:
    """Render presenters (and containers of them) into plain data.

    Anything that is not a presenter, a presented container, a list, tuple
    or dict is returned unchanged.
    """
    from presenter.base import Presenter

    if isinstance(value, (Presenter, PresentedPage)):
        return value.to_dict()
    if isinstance(value, PresentedCollection):
        return value.to_list()
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    return value
