"""
Exception Handlers.

FastAPI exception handlers that convert application exceptions
to standardized API responses. All exceptions are logged and
returned in the standard ErrorResponse format.

Usage:
    from notekeeper.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notekeeper.core.exceptions import (
    ApplicationError,
    NotFoundError,
    ValidationError,
)
from notekeeper.core.logging import get_logger
from notekeeper.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)

# Map exception types to HTTP status codes; anything else is a server error
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
}

INTERNAL_ERROR_CODE = "SYS_INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _error_response(
    request: Request,
    status_code: int,
    error_detail: ErrorDetail,
) -> JSONResponse:
    metadata = ResponseMetadata(request_id=_get_request_id(request))
    response = ErrorResponse(error=error_detail, metadata=metadata)
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    Client errors are reported with their code and message. Server errors,
    including StorageError, are logged in full and reported generically.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)

    log_extra = {
        "code": exc.code,
        "message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }

    if status_code >= 500:
        logger.error("Server error", extra=log_extra)
        error_detail = ErrorDetail(code=INTERNAL_ERROR_CODE, message=INTERNAL_ERROR_MESSAGE)
    else:
        logger.warning("Client error", extra=log_extra)
        error_detail = ErrorDetail(code=exc.code, message=exc.message)

    if isinstance(exc, ValidationError) and exc.violations:
        error_detail.details = exc.details

    return _error_response(request, status_code, error_detail)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """
    Handle routing-level HTTP errors.

    An unmatched route becomes a "Route not found" error in the
    standard envelope.
    """
    if exc.status_code == 404:
        error_detail = ErrorDetail(code="RES_ROUTE_NOT_FOUND", message="Route not found")
    elif exc.status_code == 405:
        error_detail = ErrorDetail(code="RES_METHOD_NOT_ALLOWED", message="Method not allowed")
    else:
        error_detail = ErrorDetail(code=f"HTTP_{exc.status_code}", message=str(exc.detail))

    logger.warning(
        "HTTP error",
        extra={
            "status": exc.status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )

    response = _error_response(request, exc.status_code, error_detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle malformed requests that FastAPI rejects before the endpoint runs.

    Field-level note checks are not reported here; they come back as
    ValidationError with status 400.
    """
    errors = exc.errors()
    details = {
        "validation_errors": [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", [])),
                "message": err.get("msg", "Validation error"),
                "type": err.get("type", "unknown"),
            }
            for err in errors
        ]
    }

    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
        },
    )

    error_detail = ErrorDetail(
        code="VAL_REQUEST_INVALID",
        message="Request validation failed",
        details=details,
    )
    return _error_response(request, 422, error_detail)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full traceback and returns a generic error without
    internal details.
    """
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
        },
    )

    error_detail = ErrorDetail(code=INTERNAL_ERROR_CODE, message=INTERNAL_ERROR_MESSAGE)
    return _error_response(request, 500, error_detail)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
