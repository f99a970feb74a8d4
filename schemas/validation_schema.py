"""Schemas for food validation requests and verdicts."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.restriction_schema import TIME_PATTERN

DAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


class Severity(str, Enum):
    """Verdict colour. RED blocks, YELLOW warns, GREEN endorses."""

    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.GREEN: 0, Severity.YELLOW: 1, Severity.RED: 2}


class AlertType(str, Enum):
    ALLERGY = "allergy"
    INTOLERANCE = "intolerance"
    DIET_PATTERN = "diet_pattern"
    DAY_RESTRICTION = "day_restriction"
    FOOD_RESTRICTION = "food_restriction"
    MEDICAL = "medical"
    LAB_DERIVED = "lab_derived"
    DISLIKE = "dislike"
    PREFERENCE_MATCH = "preference_match"
    CUISINE_MATCH = "cuisine_match"
    REPETITION = "repetition"
    NUTRITION_STRENGTH = "nutrition_strength"


class ValidationContext(BaseModel):
    """Where in a plan the candidate food would be placed."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    current_day: str = Field(..., examples=["tuesday"], description="Day name the meal falls on")
    meal_type: str = Field(..., examples=["breakfast"], description="breakfast, lunch, snack, dinner, ...")
    plan_id: Optional[str] = Field(None, examples=["12"], description="Diet plan id; enables repetition and nutrition checks")
    scheduled_time: Optional[str] = Field(None, examples=["19:30"], description="Planned time of the meal (HH:MM, 24h)")

    @field_validator("current_day", mode="before")
    @classmethod
    def _normalize_day(cls, value):
        if value is None:
            raise ValueError("current_day is required")
        value = str(value).strip().lower()
        if value not in DAY_NAMES:
            raise ValueError(f"unknown day name: {value!r}")
        return value

    @field_validator("meal_type", mode="before")
    @classmethod
    def _normalize_meal(cls, value):
        if value is None:
            raise ValueError("meal_type is required")
        value = str(value).strip().lower()
        if not value:
            raise ValueError("meal_type must not be empty")
        return value

    @field_validator("plan_id", mode="before")
    @classmethod
    def _stringify_plan(cls, value):
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("scheduled_time")
    @classmethod
    def _check_time(cls, value):
        if value is None:
            return None
        value = value.strip()
        if not TIME_PATTERN.match(value):
            raise ValueError(f"scheduled_time must be HH:MM, got {value!r}")
        return value


class ValidationAlert(BaseModel):
    """One reason behind a verdict."""

    type: AlertType
    severity: Severity
    message: str
    recommendation: Optional[str] = None
    icon: Optional[str] = None


class ValidationResult(BaseModel):
    food_id: str
    food_name: str
    severity: Severity
    border_color: str
    can_add: bool
    alerts: List[ValidationAlert] = Field(default_factory=list)
    confidence_score: float


class BatchValidationResult(BaseModel):
    results: List[ValidationResult] = Field(default_factory=list)
    processing_time_ms: float


class ValidationCheckRequest(BaseModel):
    """Payload for validating a single food item."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    client_id: str = Field(..., examples=["1"], description="Client the plan belongs to")
    food_id: str = Field(..., examples=["42"], description="Candidate food item")
    context: ValidationContext


class BatchValidationRequest(BaseModel):
    """Payload for validating several food items for one client."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    client_id: str = Field(..., examples=["1"])
    food_ids: List[str] = Field(..., min_length=1, max_length=50, examples=[["42", "43"]])
    context: ValidationContext


class CacheInvalidationRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    client_id: Optional[str] = Field(None, description="Client to invalidate; omit to clear the whole cache")


class CacheInvalidationResponse(BaseModel):
    success: bool
    message: str
