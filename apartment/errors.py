"""
Error taxonomy for the apartment API.

Every failure leaves a handler as ``{"error": message}`` with the status code
of the exception class; conflicts caused by references also carry a
``count``. Anything not raised as an ``ApartmentError`` is logged
and reported as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ApartmentError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(ApartmentError):
    """Malformed or missing request fields."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid request format"):
        super().__init__(message)


class NotFoundError(ApartmentError):
    """Unknown alias token, login token or id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApartmentError):
    """The request collides with existing state."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str, status_code: int | None = None, count: int | None = None):
        self.count = count
        super().__init__(message, status_code)

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.count is not None:
            body["count"] = self.count
        return body


class InternalError(ApartmentError):
    """Storage failure or unexpected condition."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def apartment_error_handler(request: Request, exc: ApartmentError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request format"
    if errors:
        loc = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        if loc:
            message = f"{message}: {loc}"
    return await apartment_error_handler(request, ValidationError(message))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return _error_response(status.HTTP_409_CONFLICT, "Conflicts with existing data")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return _error_response(error.status_code, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApartmentError, apartment_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
