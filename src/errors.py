"""Application errors and their translation into JSON responses.

Every failure leaves the API in the same envelope::

    {"success": false, "message": "...", "errors": [{"field": ..., "message": ...}]}

``errors`` is only present for validation failures.
"""

import logging
from typing import NamedTuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FieldError(NamedTuple):
    """A single validation failure tied to a request field."""

    field: str
    message: str


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server Error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input; carries every field failure at once."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation error"

    def __init__(self, errors: list[FieldError], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors)


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class ConflictError(AppError):
    """Duplicate unique value, reported as a 400."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "User with this email already exists"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authorized to access this route"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class DeliveryFailureError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Email could not be sent"


class TokenError(Exception):
    """Bearer token could not be verified."""


class TokenExpiredError(TokenError):
    pass


class TokenInvalidError(TokenError):
    pass


def error_body(message: str, errors: list[FieldError] | None = None) -> dict:
    """Build the failure envelope."""
    body: dict = {"success": False, "message": message}
    if errors:
        body["errors"] = [{"field": e.field, "message": e.message} for e in errors]
    return body


def _field_from_loc(loc: tuple) -> str:
    # ("body", "email") -> "email"; a body that is not an object -> "body"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) if parts else "body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    errors = exc.errors if isinstance(exc, ValidationError) else None
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, errors),
        headers=headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [FieldError(_field_from_loc(tuple(e["loc"])), e["msg"]) for e in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation error", errors),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Route not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server Error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error envelope on ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
