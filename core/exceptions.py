"""Custom exception classes for the validation service.

Domain errors carry an HTTP status code and a details dictionary so the
FastAPI handlers in `core.error_handlers` can render them uniformly. The
validation engine itself only raises `NotFoundError`; everything else is
raised by the HTTP and persistence layers.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a client, food item or plan does not exist.

    `resource` names the missing entity ("Client", "Food", ...) so callers
    can tell which half of a validation request was unknown.
    """

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when request input fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)
