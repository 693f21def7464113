"""Translate application errors into the ``{error, details}`` JSON envelope."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.domain.exceptions import (
    ConflictError,
    NotFoundError,
    RequestValidationFailed,
    ServiceError,
)

logger = logging.getLogger(__name__)

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def error_response(
    status_code: int, error: str, details: Any = None
) -> JSONResponse:
    content: dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _status_for(exc: ServiceError) -> int:
    if isinstance(exc, RequestValidationFailed):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(
            "%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details
        )
    return error_response(status_code, exc.message, exc.details)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    missing = [
        _field_name(tuple(error.get("loc", ())))
        for error in errors
        if error.get("type") in _MISSING_ERROR_TYPES
    ]
    if missing:
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Missing required fields", ", ".join(missing)
        )
    details = "; ".join(
        f"{_field_name(tuple(error.get('loc', ())))}: {error.get('msg')}"
        for error in errors
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", details)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def catch_unexpected_errors(request: Request, call_next):
    """Turn any unhandled exception into a 500 envelope.

    Must sit inside the CORS middleware; the envelope then carries the CORS
    headers like any other response.
    """

    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            str(exc) or exc.__class__.__name__,
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers. Call before adding the CORS middleware."""

    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.middleware("http")(catch_unexpected_errors)


__all__ = ["error_response", "register_exception_handlers"]
