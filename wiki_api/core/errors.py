from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from wiki_api.models.schemas import StoreError
from wiki_api.services.utils import to_plain


logger = logging.getLogger("wiki_api.errors")


def _plain(value):
    # Driver details may hold BSON types (ObjectId, Timestamp); anything
    # that is not a server reply (e.g. a topology description) is dropped
    if not isinstance(value, (dict, list)):
        return None
    return to_plain(value)


def store_error_body(exc: PyMongoError) -> StoreError:
    return StoreError(
        name=type(exc).__name__,
        message=str(exc),
        code=getattr(exc, "code", None),
        details=_plain(getattr(exc, "details", None)),
    )


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    # Store failures go back to the client as a 200 with the error as body
    logger.warning(
        "Store operation failed",
        extra={
            "event": "store_error",
            "method": request.method,
            "path": request.url.path,
            "error": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=200, content=store_error_body(exc).model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PyMongoError, store_error_handler)
