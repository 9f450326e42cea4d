"""
Storage outcomes and their HTTP translation.

Feature code raises `NotFoundError` or `StorageError`; the handlers registered
here are the only place those become status codes. Bodies carry the standard
reason phrase only, never the underlying driver message.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """No row matches the requested key."""


class StorageError(RuntimeError):
    """Any other database or driver failure."""


ERROR_STATUS: dict[type[Exception], HTTPStatus] = {
    NotFoundError: HTTPStatus.NOT_FOUND,
    StorageError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(exc: Exception) -> HTTPStatus:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status
    return HTTPStatus.INTERNAL_SERVER_ERROR


def _error_response(status: HTTPStatus) -> JSONResponse:
    return JSONResponse(status_code=int(status), content={"detail": status.phrase})


def register_error_handlers(app: FastAPI) -> None:
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.debug("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(status_for(exc))

    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "%s %s failed in storage",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return _error_response(status_for(exc))

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
