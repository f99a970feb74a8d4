"""Dietitian-authored food restrictions.

A client's restrictions are persisted as a JSON list of dicts. Each entry is
parsed into one variant keyed by `restriction_type`, and each variant only
carries the fields that type understands:

    always      -> no extra fields
    day_based   -> avoid_days
    time_based  -> avoid_meals, avoid_after, avoid_before
    frequency   -> max_per_week, max_per_day
    quantity    -> max_grams_per_meal

Both snake_case and the camelCase keys written by the dashboard are accepted.
Free-text fields are lower-cased at construction and instances are frozen.
"""

import re
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def normalize_id(value: Any) -> str:
    """Canonical string form of a record id.

    Stores accept "01" and "1" as the same integer key, so numeric ids lose
    their leading zeros here and every cache or lookup key agrees.
    """
    text = str(value).strip()
    if text.isascii() and text.isdigit():
        return str(int(text))
    return text


def _lower_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    return tuple(str(v).strip().lower() for v in value if str(v).strip())


class RestrictionBase(BaseModel):
    """Fields shared by every restriction variant."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")

    # Target selectors; a restriction without any of them never applies.
    food_id: Optional[str] = None
    food_name: Optional[str] = None
    food_category: Optional[str] = None

    includes: Tuple[str, ...] = ()
    excludes: Tuple[str, ...] = ()

    severity: Literal["strict", "flexible"] = "flexible"
    reason: Optional[str] = None
    note: Optional[str] = None

    @field_validator("food_id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        if value is None or value == "":
            return None
        return normalize_id(value)

    @field_validator("food_name", "food_category", mode="before")
    @classmethod
    def _lower_text(cls, value):
        if value is None:
            return None
        value = str(value).strip().lower()
        return value or None

    @field_validator("severity", mode="before")
    @classmethod
    def _lower_severity(cls, value):
        # only an explicit "strict" blocks
        if value is not None and str(value).strip().lower() == "strict":
            return "strict"
        return "flexible"

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def _lower_lists(cls, value):
        return _lower_tuple(value)

    @property
    def has_target(self) -> bool:
        return bool(self.food_id or self.food_name or self.food_category)

    @property
    def target_label(self) -> str:
        """Human-readable name of whatever this restriction targets."""
        label = self.food_category or self.food_name or "this food"
        return label.replace("_", " ")


class AlwaysRestriction(RestrictionBase):
    restriction_type: Literal["always"] = "always"


class DayBasedRestriction(RestrictionBase):
    restriction_type: Literal["day_based"] = "day_based"
    avoid_days: Tuple[str, ...] = ()

    @field_validator("avoid_days", mode="before")
    @classmethod
    def _lower_days(cls, value):
        return _lower_tuple(value)


class TimeBasedRestriction(RestrictionBase):
    restriction_type: Literal["time_based"] = "time_based"
    # None means no meal list; an empty list matches no meal
    avoid_meals: Optional[Tuple[str, ...]] = None
    avoid_after: Optional[str] = None
    avoid_before: Optional[str] = None

    @field_validator("avoid_meals", mode="before")
    @classmethod
    def _lower_meals(cls, value):
        return None if value is None else _lower_tuple(value)

    @field_validator("avoid_after", "avoid_before")
    @classmethod
    def _check_time(cls, value):
        if value is None:
            return None
        value = value.strip()
        if not TIME_PATTERN.match(value):
            raise ValueError(f"expected HH:MM, got {value!r}")
        return value


class FrequencyRestriction(RestrictionBase):
    restriction_type: Literal["frequency"] = "frequency"
    max_per_week: Optional[int] = Field(default=None, ge=0)
    max_per_day: Optional[int] = Field(default=None, ge=0)


class QuantityRestriction(RestrictionBase):
    restriction_type: Literal["quantity"] = "quantity"
    max_grams_per_meal: Optional[float] = Field(default=None, ge=0)


FoodRestriction = Union[
    AlwaysRestriction,
    DayBasedRestriction,
    TimeBasedRestriction,
    FrequencyRestriction,
    QuantityRestriction,
]

RESTRICTION_TYPES: Dict[str, Type[RestrictionBase]] = {
    "always": AlwaysRestriction,
    "day_based": DayBasedRestriction,
    "time_based": TimeBasedRestriction,
    "frequency": FrequencyRestriction,
    "quantity": QuantityRestriction,
}


class InvalidRestrictionError(ValueError):
    """Raised when a stored restriction record cannot be parsed."""


def parse_restriction(raw: Any) -> FoodRestriction:
    """Build the restriction variant named by the record's type field.

    Raises:
        InvalidRestrictionError: If the record is not a mapping, names an
            unknown restriction type, or has badly typed fields.
    """
    if isinstance(raw, RestrictionBase):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidRestrictionError(f"restriction must be an object, got {type(raw).__name__}")

    kind = raw.get("restriction_type", raw.get("restrictionType"))
    model = RESTRICTION_TYPES.get(str(kind).strip().lower()) if kind is not None else None
    if model is None:
        raise InvalidRestrictionError(f"unknown restriction type: {kind!r}")

    payload = {k: v for k, v in raw.items() if k not in ("restriction_type", "restrictionType")}
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRestrictionError(str(exc)) from exc
