"""Pydantic schema package for request and response models."""

from .food_schema import FoodDetail, AutoTagResponse
from .restriction_schema import FoodRestriction, InvalidRestrictionError, parse_restriction
from .validation_schema import (
    AlertType,
    BatchValidationRequest,
    BatchValidationResult,
    CacheInvalidationRequest,
    CacheInvalidationResponse,
    Severity,
    ValidationAlert,
    ValidationCheckRequest,
    ValidationContext,
    ValidationResult,
)

__all__ = [
    "FoodDetail",
    "AutoTagResponse",
    "FoodRestriction",
    "InvalidRestrictionError",
    "parse_restriction",
    "AlertType",
    "BatchValidationRequest",
    "BatchValidationResult",
    "CacheInvalidationRequest",
    "CacheInvalidationResponse",
    "Severity",
    "ValidationAlert",
    "ValidationCheckRequest",
    "ValidationContext",
    "ValidationResult",
]
