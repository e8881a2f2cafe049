"""Exception handlers: the one place errors become HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from draftpress.errors import AppError, DuplicateKey, Internal
from draftpress.schemas.common import ErrorEnvelope

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None):
    """Build the ``{"success": false, "error": ...}`` envelope."""
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer", **(headers or {})}
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=message).model_dump(),
        headers=headers,
    )


def validation_message(exc: RequestValidationError) -> str:
    """Turn the first request validation error into a readable message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    if error["type"] == "json_invalid":
        return "Invalid JSON body"
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    if not loc and error["type"] == "missing":
        return "Request body is required"
    if loc:
        return f"{'.'.join(loc)}: {error['msg']}"
    return error["msg"]


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = validation_message(exc)
    logger.info(f"{request.method} {request.url.path} -> 400: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return error_response(DuplicateKey.status_code, DuplicateKey.message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(Internal.status_code, Internal.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
