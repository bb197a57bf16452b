"""Map domain errors onto HTTP responses.

Only the named error kinds get a distinguishing status; anything else is a
generic 500 with the details kept in the logs.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError

from shops.shared.errors import (
    AuthorizationError,
    ConflictError,
    StaleShopError,
    StoreError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


def _message(status_code: int, msg: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg, **extra})


async def _validation_failed(request: Request, exc: ValidationError) -> JSONResponse:
    return _message(400, "Validation failed", errors=exc.messages)


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _message(404, getattr(exc, "message", "Not found"))


async def _not_authorized(request: Request, exc: AuthorizationError) -> JSONResponse:
    return _message(401, exc.message)


async def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return _message(400, exc.message)


async def _stale(request: Request, exc: StaleShopError) -> JSONResponse:
    return _message(409, exc.message)


async def _store_failed(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure", path=request.url.path, error=exc.message)
    return _message(500, "Server Error")


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return _message(500, "Server Error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_failed)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(AuthorizationError, _not_authorized)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(StaleShopError, _stale)
    app.add_exception_handler(StoreError, _store_failed)
    app.add_exception_handler(Exception, _unexpected)
