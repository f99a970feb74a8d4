"""FastAPI exception handlers.

Every error leaves the service in the same envelope:

    {"error": {"message": ..., "status_code": ..., "details": {...}}}

Domain errors keep their status code, request validation failures become
422 with a per-field breakdown, and database or unexpected errors become an
opaque 500.
"""

from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import AppException, NotFoundError
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the standard error envelope."""
    body: Dict[str, Any] = {"message": message, "status_code": status_code}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render an `AppException` with its own status code and details."""
    if isinstance(exc, NotFoundError):
        logger.info("%s not found: %s [%s %s]", exc.resource, exc.identifier, request.method, request.url.path)
    else:
        logger.warning("Application error: %s [%s %s]", exc.message, request.method, request.url.path)
    return create_error_response(exc.message, exc.status_code, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic errors into `{field, message, type}` entries."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, errors)
    return create_error_response(
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"validation_errors": errors},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log database failures in full but only expose a generic message."""
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return create_error_response(
        "A database error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "database_error"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything not covered above."""
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return create_error_response(
        "An internal server error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "internal_error"},
    )


def register_exception_handlers(app):
    """Attach all handlers to a FastAPI application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    logger.info("Exception handlers registered")
