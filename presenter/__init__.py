from presenter.base import Presenter
from presenter.core.exceptions import InvalidArgumentError, PresenterError
from presenter.core.pagination import Page, Paginator, paginate
from presenter.presented import PageLinks, PageMeta, PresentedCollection, PresentedPage, serialize

__all__ = [
    "Presenter",
    "PresentedCollection",
    "PresentedPage",
    "PageLinks",
    "PageMeta",
    "Page",
    "Paginator",
    "paginate",
    "serialize",
    "PresenterError",
    "InvalidArgumentError",
]
