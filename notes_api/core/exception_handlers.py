"""
Exception Handlers.

FastAPI exception handlers that convert application exceptions
to the standard error envelope. All exceptions are logged and
returned as {"status": "fail" | "error", "message": ...}.

Usage:
    from notes_api.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notes_api.core.exceptions import (
    ApplicationError,
    ConflictError,
    DecodeError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from notes_api.core.logging import get_logger
from notes_api.schemas.base import ErrorResponse

logger = get_logger(__name__)

# Map exception types to HTTP status codes
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    ValidationError: 400,
    DecodeError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StoreError: 502,
}


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _status_label(status_code: int) -> str:
    return "error" if status_code >= 500 else "fail"


def _error_response(status_code: int, response: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", exclude_none=True),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    Converts application exceptions to error envelopes with the
    appropriate HTTP status codes.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)

    log_extra = {
        "code": exc.code,
        "message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }
    request_id = _get_request_id(request)
    if request_id:
        log_extra["request_id"] = request_id

    if status_code >= 500:
        logger.error("Server error", extra=log_extra)
    else:
        logger.warning("Client error", extra=log_extra)

    response = ErrorResponse(
        status=_status_label(status_code),
        message=exc.message,
        errors=exc.violations if isinstance(exc, ValidationError) else None,
    )
    return _error_response(status_code, response)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle request decoding failures raised by FastAPI.

    Bodies are accepted as raw JSON and validated by the endpoints, so
    anything FastAPI rejects here is a body it could not decode.
    """
    errors = exc.errors()
    first = errors[0].get("msg", "invalid body") if errors else "invalid body"

    logger.warning(
        "Request decoding failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
            "request_id": _get_request_id(request),
        },
    )

    return _error_response(
        400,
        ErrorResponse(status="fail", message=f"Malformed request body: {first}"),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Catches all unhandled exceptions and returns a generic error
    response without internal details.
    """
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": _get_request_id(request),
        },
    )

    return _error_response(
        500,
        ErrorResponse(status="error", message="An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
