"""Presenter base class.

A presenter wraps exactly one model. Anything the presenter class does not
define itself (attributes and methods alike) is looked up on the wrapped
model, so a subclass only declares what it changes, typically ``to_dict``::

    class UserPresenter(Presenter[User]):
        def to_dict(self):
            return {"fullname": self.fullname(), "email": self.email}

    UserPresenter.make(user).to_dict()
    UserPresenter.collection(users).to_list()
    UserPresenter.pagination(page).to_dict()
"""

import inspect
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from presenter.core.exceptions import InvalidArgumentError
from presenter.core.logging import get_logger
from presenter.core.pagination import PAGINATOR_FIELDS, Paginator, page_url
from presenter.presented import PageLinks, PageMeta, PresentedCollection, PresentedPage

log = get_logger(__name__)

ModelT = TypeVar("ModelT")
P = TypeVar("P", bound="Presenter")

_MISSING = object()


class Presenter(Generic[ModelT]):
    def __init__(self, model: ModelT):
        if model is None:
            log.warning("presenter_invalid_argument", presenter=type(self).__name__, reason="missing_model")
            raise InvalidArgumentError(f"{type(self).__name__} requires a model to present")
        self._model = model

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup on the presenter fails. A name the
        # presenter class defines is never forwarded: repeat the normal lookup
        # so its own AttributeError surfaces. Errors raised by the model
        # (including AttributeError) propagate untouched.
        if inspect.getattr_static(type(self), name, _MISSING) is not _MISSING:
            return object.__getattribute__(self, name)
        try:
            model = self.__dict__["_model"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(model, name)

    def __dir__(self) -> list[str]:
        forwarded = {name for name in dir(self._model) if not name.startswith("_")}
        return sorted(set(super().__dir__()) | forwarded)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._model!r})"

    def get_model(self) -> ModelT:
        return self._model

    def to_dict(self) -> Any:
        """Serialize the wrapped model with its own serializer.

        Uses ``model.to_dict()`` when the model defines one and falls back to
        ``model_dump()`` for pydantic models. Override to reshape the output.
        """
        model = self._model
        to_dict = getattr(model, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        if isinstance(model, BaseModel):
            return model.model_dump()
        raise InvalidArgumentError(
            f"{type(model).__name__} defines neither to_dict() nor model_dump(); "
            f"override {type(self).__name__}.to_dict()"
        )

    @classmethod
    def make(cls: type[P], model: Any) -> P:
        return cls(model)

    @classmethod
    def collection(cls: type[P], models: Iterable[Any]) -> PresentedCollection:
        if models is None:
            log.warning("presenter_invalid_argument", presenter=cls.__name__, reason="missing_models")
            raise InvalidArgumentError(f"{cls.__name__}.collection() requires an iterable of models")
        return PresentedCollection(cls.make(model) for model in models)

    @classmethod
    def pagination(cls: type[P], paginator: Paginator) -> PresentedPage:
        if paginator is None:
            log.warning("presenter_invalid_argument", presenter=cls.__name__, reason="missing_paginator")
            raise InvalidArgumentError(f"{cls.__name__}.pagination() requires a paginator")
        missing = [field for field in PAGINATOR_FIELDS if not hasattr(paginator, field)]
        if missing:
            log.warning(
                "presenter_invalid_argument",
                presenter=cls.__name__,
                reason="incomplete_paginator",
                missing=missing,
            )
            raise InvalidArgumentError(
                f"Paginator {type(paginator).__name__} is missing: {', '.join(missing)}",
                details={"missing": missing},
            )

        items = paginator.items
        if callable(items):
            items = items()
        current_page = paginator.current_page
        last_page = paginator.last_page
        path = paginator.path

        try:
            links = PageLinks(
                first=page_url(path, 1),
                last=page_url(path, last_page),
                prev=page_url(path, current_page - 1) if current_page > 1 else None,
                next=current_page + 1 if current_page < last_page else None,
            )
            meta = PageMeta(
                current_page=current_page,
                from_=paginator.first_item,
                last_page=last_page,
                path=path,
                per_page=paginator.per_page,
                to=paginator.last_item,
                total=paginator.total,
            )
        except (TypeError, ValidationError) as exc:
            log.warning("presenter_invalid_argument", presenter=cls.__name__, reason="invalid_paginator")
            raise InvalidArgumentError(
                f"Paginator {type(paginator).__name__} has invalid pagination fields",
                details={"error": str(exc)},
            ) from exc

        data = cls.collection(items)
        log.debug(
            "pagination_presented",
            presenter=cls.__name__,
            current_page=current_page,
            last_page=last_page,
            count=len(data),
        )
        return PresentedPage(data=data, links=links, meta=meta)
