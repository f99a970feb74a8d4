"""Evaluation of dietitian-authored food restrictions.

A restriction produces an alert for a food when three things hold:

1. its target selector (food id, name or category) matches the food,
2. the food is not carved out by the restriction's `excludes`,
3. the restriction is active for the current day / meal / time.

`strict` restrictions block (RED); `flexible` ones warn (YELLOW).
"""

from typing import List, Optional

from schemas.restriction_schema import (
    AlwaysRestriction,
    DayBasedRestriction,
    FoodRestriction,
    FrequencyRestriction,
    QuantityRestriction,
    TimeBasedRestriction,
    normalize_id,
)
from schemas.validation_schema import AlertType, Severity, ValidationAlert, ValidationContext
from services.tag_extraction import FoodTagSet
from services.validation_rules import MEAL_DEFAULT_MINUTES, parse_minutes


def _matches_category(category: str, restriction: FoodRestriction, food: FoodTagSet) -> bool:
    if category == "non_veg" and food.dietary_category == "non_veg":
        return True
    if category == "eggs" and "eggs" in food.allergen_flags:
        return True
    if category == "dairy" and ({"milk", "dairy"} & food.allergen_flags):
        return True
    # Categories such as root_vegetables are defined by their `includes` list.
    if any(item in food.name_lower for item in restriction.includes):
        return True
    if category in food.cuisine_tags or category == food.category:
        return True
    return category in food.name_lower


def restriction_applies(restriction: FoodRestriction, food: FoodTagSet) -> bool:
    """Return True if the restriction's target selector matches the food."""
    if restriction.food_id and restriction.food_id == food.id:
        return True
    if restriction.food_category and _matches_category(restriction.food_category, restriction, food):
        return True
    if restriction.food_name and food.name_lower:
        name = restriction.food_name
        if name in food.name_lower or food.name_lower in name:
            return True
    return False


def is_excluded(restriction: FoodRestriction, food: FoodTagSet) -> bool:
    """Return True if any `excludes` entry carves this food out.

    An entry matches the food id, a substring of the food name, or one of the
    food's allergen flags (so "eggs" lifts a non-veg rule for egg dishes).
    """
    for exclude in restriction.excludes:
        if normalize_id(exclude) == food.id.lower():
            return True
        if exclude in food.name_lower:
            return True
        if exclude in food.allergen_flags:
            return True
    return False


def meal_minute(context: ValidationContext) -> Optional[int]:
    """Minute of day for the meal: scheduled time first, meal default second."""
    scheduled = parse_minutes(context.scheduled_time)
    if scheduled is not None:
        return scheduled
    return MEAL_DEFAULT_MINUTES.get(context.meal_type)


def _in_time_window(restriction: TimeBasedRestriction, minute: int) -> bool:
    after = parse_minutes(restriction.avoid_after)
    before = parse_minutes(restriction.avoid_before)
    if after is not None and before is not None:
        if after < before:
            # e.g. avoid after 10:00 and before 14:00 -> a daytime window
            return after <= minute < before
        # e.g. avoid after 19:00 and before 08:00 -> window across midnight
        return minute >= after or minute < before
    if after is not None:
        return minute >= after
    return minute < before


def is_active(restriction: FoodRestriction, context: ValidationContext) -> bool:
    """Return True if the restriction is in force for this context."""
    if isinstance(restriction, AlwaysRestriction):
        return True
    if isinstance(restriction, DayBasedRestriction):
        return context.current_day in restriction.avoid_days
    if isinstance(restriction, TimeBasedRestriction):
        if restriction.avoid_meals is not None:
            return context.meal_type in restriction.avoid_meals
        if restriction.avoid_after is None and restriction.avoid_before is None:
            return True
        minute = meal_minute(context)
        if minute is None:
            return False
        return _in_time_window(restriction, minute)
    # frequency and quantity restrictions are shown as standing reminders
    return isinstance(restriction, (FrequencyRestriction, QuantityRestriction))


def _time_phrase(restriction: TimeBasedRestriction, context: ValidationContext) -> str:
    if restriction.avoid_meals:
        return f"during {context.meal_type.replace('_', ' ')}"
    parts = []
    if restriction.avoid_after:
        parts.append(f"after {restriction.avoid_after}")
    if restriction.avoid_before:
        parts.append(f"before {restriction.avoid_before}")
    return " or ".join(parts) if parts else f"during {context.meal_type.replace('_', ' ')}"


def build_restriction_message(restriction: FoodRestriction, severity: Severity, context: ValidationContext) -> str:
    target = restriction.target_label
    reason = f" ({restriction.reason.replace('_', ' ')})" if restriction.reason else ""
    strict = severity == Severity.RED

    if isinstance(restriction, DayBasedRestriction):
        day = context.current_day
        if strict:
            return f"RESTRICTED: No {target} on {day}{reason}"
        return f"CAUTION: Client prefers to avoid {target} on {day}{reason}"
    if isinstance(restriction, AlwaysRestriction):
        if strict:
            return f"RESTRICTED: Client never eats {target}{reason}"
        return f"CAUTION: Client prefers to avoid {target}{reason}"
    if isinstance(restriction, TimeBasedRestriction):
        when = _time_phrase(restriction, context)
        if strict:
            return f"RESTRICTED: No {target} {when}{reason}"
        return f"CAUTION: Client prefers to avoid {target} {when}{reason}"
    if isinstance(restriction, FrequencyRestriction):
        if restriction.max_per_day is not None and restriction.max_per_week is None:
            return f"FREQUENCY: Limit {target} to {restriction.max_per_day}/day{reason}"
        return f"FREQUENCY: Limit {target} to {restriction.max_per_week}/week{reason}"
    if isinstance(restriction, QuantityRestriction):
        grams = restriction.max_grams_per_meal
        amount = f"{grams:g}g" if grams is not None else "a small portion"
        return f"QUANTITY: Limit {target} to {amount}/meal{reason}"
    return f"RESTRICTION: {restriction.note or 'Food has restrictions'}"


def evaluate_restrictions(
    restrictions, food: FoodTagSet, context: ValidationContext
) -> List[ValidationAlert]:
    """Alerts for every restriction that applies, is not excluded and is active.

    Alerts come back in the client's restriction order.
    """
    alerts: List[ValidationAlert] = []
    for restriction in restrictions:
        if not restriction.has_target or not restriction_applies(restriction, food):
            continue
        if is_excluded(restriction, food):
            continue
        if not is_active(restriction, context):
            continue

        severity = Severity.RED if restriction.severity == "strict" else Severity.YELLOW
        alerts.append(ValidationAlert(
            type=AlertType.FOOD_RESTRICTION,
            severity=severity,
            message=build_restriction_message(restriction, severity, context),
            recommendation=restriction.note,
            icon="ban" if severity == Severity.RED else "alert-triangle",
        ))
    return alerts
