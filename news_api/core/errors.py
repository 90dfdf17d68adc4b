from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import FastAPI, Request
from fastapi import status as http_status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger("news_api.errors")

BAD_REQUEST_MSG = "400: Bad request"
NOT_FOUND_MSG = "404: Not found"
SERVER_ERROR_MSG = "500: Internal server error"

# invalid_text_representation, numeric_value_out_of_range,
# not_null_violation, foreign_key_violation
BAD_REQUEST_SQLSTATES = frozenset({"22P02", "22003", "23502", "23503"})


class APIError(Exception):
    """Rejection carrying the HTTP status and message sent back to the client."""

    status: int = http_status.HTTP_500_INTERNAL_SERVER_ERROR
    msg: str = SERVER_ERROR_MSG

    def __init__(self, msg: str | None = None, *, status_code: int | None = None) -> None:
        if msg is not None:
            self.msg = msg
        if status_code is not None:
            self.status = status_code
        super().__init__(self.msg)


class BadRequest(APIError):
    status = http_status.HTTP_400_BAD_REQUEST
    msg = BAD_REQUEST_MSG


class NotFound(APIError):
    status = http_status.HTTP_404_NOT_FOUND
    msg = NOT_FOUND_MSG


class MissingField(BadRequest):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__()


class WrongType(BadRequest):
    def __init__(self, field: str, detail: str = "") -> None:
        self.field = field
        self.detail = detail
        super().__init__()


def _loc_to_field(loc: tuple[Any, ...] | list[Any]) -> str:
    # drop the leading "body"/"path"/"query" marker
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


def classify_validation_error(exc: RequestValidationError) -> BadRequest:
    errors = exc.errors()
    if not errors:
        return BadRequest()
    first = errors[0]
    field = _loc_to_field(first.get("loc", ()))
    if first.get("type") == "missing":
        return MissingField(field)
    return WrongType(field, first.get("msg", ""))


def _msg_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"event": "server_error", "method": request.method, "path": request.url.path},
    )
    return _msg_response(http_status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MSG)


async def psql_error_handler(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    code = getattr(exc, "sqlstate", None)
    # argument encoding failures are raised client-side as DataError
    if code in BAD_REQUEST_SQLSTATES or isinstance(exc, asyncpg.exceptions.DataError):
        logger.warning(
            "Database rejected input",
            extra={"event": "db_bad_request", "sqlstate": code, "path": request.url.path},
        )
        return _msg_response(http_status.HTTP_400_BAD_REQUEST, BAD_REQUEST_MSG)
    return await server_error_handler(request, exc)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status >= 500:
        return await server_error_handler(request, exc)
    return _msg_response(exc.status, exc.msg)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = classify_validation_error(exc)
    extra: dict[str, Any] = {"event": "request_validation_failed", "path": request.url.path}
    if isinstance(err, (MissingField, WrongType)):
        extra["field"] = err.field
        extra["kind"] = type(err).__name__
    logger.warning("Request validation failed", extra=extra)
    return _msg_response(err.status, err.msg)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # an unsupported method on a known path is just another unmatched route
    if exc.status_code in (http_status.HTTP_404_NOT_FOUND, http_status.HTTP_405_METHOD_NOT_ALLOWED):
        return _msg_response(http_status.HTTP_404_NOT_FOUND, NOT_FOUND_MSG)
    return _msg_response(exc.status_code, f"{exc.status_code}: {exc.detail}")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(asyncpg.PostgresError, psql_error_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
