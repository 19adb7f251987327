"""FastAPI integration.

Wrap presenters in ``PresenterResponse`` and return the response itself, so
FastAPI's ``jsonable_encoder`` never sees the presenter objects::

    @router.get("/users")
    async def list_users(page: int = 1):
        return PresenterResponse(UserPresenter.pagination(await users_page(page)))
"""

from typing import Any

import orjson
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from presenter.core.exceptions import InvalidArgumentError, PresenterError
from presenter.core.logging import get_logger
from presenter.presented import serialize

log = get_logger(__name__)


class PresenterResponse(JSONResponse):
    # Renders with orjson directly; FastAPI's ORJSONResponse is deprecated.
    def render(self, content: Any) -> bytes:
        return orjson.dumps(serialize(content), option=orjson.OPT_NON_STR_KEYS)


async def presenter_exception_handler(request: Request, exc: PresenterError) -> PresenterResponse:
    body = exc.to_dict()
    if hasattr(request.state, "request_id"):
        body["request_id"] = request.state.request_id
    if isinstance(exc, InvalidArgumentError):
        log.warning(
            "presenter_invalid_argument",
            path=request.url.path,
            message=exc.message,
            missing=exc.details.get("missing", []),
        )
    else:
        log.error("presenter_error", code=exc.code, message=exc.message, path=request.url.path)
    return PresenterResponse(body, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PresenterError, presenter_exception_handler)
