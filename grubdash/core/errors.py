"""
GrubDash — Error taxonomy and centralized exception handlers

Every failure is raised, never merely reported, so the first failing
check ends the request. Handlers below map each error onto the
`{"error": message}` envelope.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that carry an HTTP status and a client message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Malformed or incomplete request payload."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """Routed id has no matching record."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    """Request is well-formed but clashes with the stored record's state."""

    status_code = status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "%s %s rejected (%d): %s",
        request.method, request.url.path, exc.status_code, exc.message,
    )
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reachable for unparseable bodies; field rules are enforced by ResourceRules
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid request body: {message}")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
