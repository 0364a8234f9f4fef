"""
Error types raised by the API and the handlers that turn them into responses.

Route handlers raise; only the functions registered here build error bodies.
Message-style failures answer with ``{"message": ...}`` and validation
failures with ``{"errors": [...]}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from course_api.models.validation import RecordValidationError


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for failures that map to a status code and a message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccessDenied(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Access Denied"):
        super().__init__(message)


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def record_validation_handler(request: Request, exc: RecordValidationError) -> JSONResponse:
    logger.warning("Validation failed on %s %s: %s", request.method, request.url.path, exc.messages)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.messages})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"][1:])
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    logger.warning("Malformed request body on %s %s: %s", request.method, request.url.path, messages)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": messages})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Route Not Found"
    else:
        message = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RecordValidationError, record_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
