"""Ordered rule pipeline for food validation.

The pipeline is a left fold over `STAGES`. Every stage is a plain function
from `RuleInput` to a list of alerts. Blocking stages (allergies through
dietitian restrictions) end the fold on their first RED alert; the rest are
evaluated exhaustively so the dietitian sees every warning that applies.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from core.config import ValidationSettings
from schemas.validation_schema import AlertType, Severity, ValidationAlert, ValidationContext
from services.plan_context import PlanContext, check_nutrition_strength, check_repetition
from services.restriction_matcher import evaluate_restrictions
from services.tag_extraction import ClientTagSet, FoodTagSet
from services.validation_rules import (
    CATEGORY_MAPPING,
    DIET_PATTERN_RULES,
    LAB_ADVISORIES,
    MEAL_SUITABILITY_CONFLICTS,
    MEDICAL_ADVISORIES,
    NUTRIENT_NUDGES,
    Advisory,
    DietRule,
)
from services.word_match import phrase_matches


@dataclass(frozen=True)
class RuleInput:
    """Everything a rule may look at. Built once per food."""

    client: ClientTagSet
    food: FoodTagSet
    context: ValidationContext
    settings: ValidationSettings
    plan: Optional[PlanContext] = None


RuleCheck = Callable[[RuleInput], List[ValidationAlert]]


@dataclass(frozen=True)
class Stage:
    name: str
    check: RuleCheck
    blocking: bool = False


# --- Hard safety ---

def check_allergies(rule: RuleInput) -> List[ValidationAlert]:
    for allergen in sorted(rule.client.allergies):
        if allergen in rule.food.allergen_flags:
            return [ValidationAlert(
                type=AlertType.ALLERGY,
                severity=Severity.RED,
                message=f"ALLERGY: Client is allergic to {allergen}",
                icon="alert-circle",
            )]
    return []


def check_intolerances(rule: RuleInput) -> List[ValidationAlert]:
    for intolerance in sorted(rule.client.intolerances):
        if intolerance in rule.food.allergen_flags:
            return [ValidationAlert(
                type=AlertType.INTOLERANCE,
                severity=Severity.RED,
                message=f"INTOLERANCE: Client is intolerant to {intolerance}",
                icon="alert-circle",
            )]
    return []


def _diet_rule_fires(diet_rule: DietRule, category: str, egg_allowed: bool) -> bool:
    if diet_rule.requires_no_egg and egg_allowed:
        return False
    if diet_rule.allowed_only is not None:
        return category not in diet_rule.allowed_only
    return category in diet_rule.blocked


def check_diet_pattern(rule: RuleInput) -> List[ValidationAlert]:
    """Compare the client's diet pattern with the food's dietary category."""
    pattern = rule.client.diet_pattern
    category = rule.food.dietary_category
    if not pattern or not category:
        return []
    for diet_rule in DIET_PATTERN_RULES.get(pattern, ()):
        if _diet_rule_fires(diet_rule, category, rule.client.egg_allowed):
            return [ValidationAlert(
                type=AlertType.DIET_PATTERN,
                severity=diet_rule.severity,
                message=diet_rule.message,
                recommendation=diet_rule.recommendation,
                icon=diet_rule.icon,
            )]
    return []


def check_egg_days(rule: RuleInput) -> List[ValidationAlert]:
    day = rule.context.current_day
    if day in rule.client.egg_avoid_days and "eggs" in rule.food.allergen_flags:
        return [ValidationAlert(
            type=AlertType.DAY_RESTRICTION,
            severity=Severity.RED,
            message=f"DAY RESTRICTION: Client avoids eggs on {day}",
            icon="calendar-x",
        )]
    return []


def check_food_restrictions(rule: RuleInput) -> List[ValidationAlert]:
    return evaluate_restrictions(rule.client.food_restrictions, rule.food, rule.context)


# --- Advisories ---

def _advisory_alerts(advisories: Tuple[Advisory, ...], markers, food: FoodTagSet, alert_type: AlertType) -> List[ValidationAlert]:
    alerts = []
    for advisory in advisories:
        if not (advisory.conditions & markers):
            continue
        if advisory.nutrition_tags & food.nutrition_tags or advisory.health_flags & food.health_flags:
            alerts.append(ValidationAlert(
                type=alert_type,
                severity=advisory.severity,
                message=advisory.message,
                recommendation=advisory.recommendation,
                icon=advisory.icon,
            ))
    return alerts


def check_medical_conditions(rule: RuleInput) -> List[ValidationAlert]:
    return _advisory_alerts(MEDICAL_ADVISORIES, rule.client.medical_conditions, rule.food, AlertType.MEDICAL)


def check_lab_markers(rule: RuleInput) -> List[ValidationAlert]:
    """Lab-derived cautions followed by positive nutrient nudges."""
    markers = rule.client.lab_derived_tags
    return (
        _advisory_alerts(LAB_ADVISORIES, markers, rule.food, AlertType.LAB_DERIVED)
        + _advisory_alerts(NUTRIENT_NUDGES, markers, rule.food, AlertType.LAB_DERIVED)
    )


# --- Preferences ---

def check_dislikes(rule: RuleInput) -> List[ValidationAlert]:
    for phrase in sorted(rule.client.dislikes):
        if phrase_matches(rule.food.name_tokens, phrase):
            return [ValidationAlert(
                type=AlertType.DISLIKE,
                severity=Severity.YELLOW,
                message=f"DISLIKE: Client has indicated they dislike {rule.food.name}",
                recommendation="Consider alternative options",
                icon="thumb-down",
            )]
    return []


def _in_avoided_category(avoided: str, food: FoodTagSet) -> bool:
    signals = CATEGORY_MAPPING.get(avoided)
    if signals is not None:
        if food.processing_level and food.processing_level in signals.processing_levels:
            return True
        if food.category and food.category in signals.categories:
            return True
        if signals.cuisine_tags & food.cuisine_tags:
            return True
        # best effort: display names like "Fried Rice" carry the category
        return any(phrase_matches(food.name_tokens, c) for c in signals.categories)
    return avoided == food.category or avoided in food.cuisine_tags


def check_avoided_categories(rule: RuleInput) -> List[ValidationAlert]:
    alerts = []
    for avoided in sorted(rule.client.avoid_categories):
        if _in_avoided_category(avoided, rule.food):
            label = avoided.replace("_", " ")
            alerts.append(ValidationAlert(
                type=AlertType.DISLIKE,
                severity=Severity.YELLOW,
                message=f"AVOID CATEGORY: Client prefers to avoid {label}",
                recommendation="Pick an option outside this category",
                icon="filter",
            ))
    return alerts


def check_meal_suitability(rule: RuleInput) -> List[ValidationAlert]:
    meal = rule.context.meal_type
    alerts = []
    for tag in sorted(rule.food.meal_suitability_tags):
        if meal in MEAL_SUITABILITY_CONFLICTS.get(tag, ()):
            alerts.append(ValidationAlert(
                type=AlertType.FOOD_RESTRICTION,
                severity=Severity.YELLOW,
                message=f"MEAL TIMING: This food is {tag.replace('_', ' ')} ({meal.replace('_', ' ')})",
                recommendation="Schedule it for a different meal",
                icon="clock",
            ))
    return alerts


# --- Plan context ---

def check_plan_repetition(rule: RuleInput) -> List[ValidationAlert]:
    if rule.plan is None:
        return []
    return check_repetition(rule.food, rule.plan, rule.settings)


def check_plan_nutrition(rule: RuleInput) -> List[ValidationAlert]:
    if rule.plan is None:
        return []
    return check_nutrition_strength(rule.food, rule.plan, rule.settings)


# --- Positive signals ---

def check_liked_foods(rule: RuleInput) -> List[ValidationAlert]:
    food = rule.food
    liked = food.id in rule.client.liked_foods or any(
        phrase_matches(food.name_tokens, phrase) for phrase in rule.client.liked_phrases
    )
    if not liked:
        return []
    return [ValidationAlert(
        type=AlertType.PREFERENCE_MATCH,
        severity=Severity.GREEN,
        message=f"CLIENT FAVORITE: Client likes {food.name}",
        icon="heart",
    )]


def check_preferred_cuisines(rule: RuleInput) -> List[ValidationAlert]:
    for cuisine in sorted(rule.client.preferred_cuisines):
        if cuisine in rule.food.cuisine_tags:
            return [ValidationAlert(
                type=AlertType.CUISINE_MATCH,
                severity=Severity.GREEN,
                message=f"PREFERRED CUISINE: Client likes {cuisine} food",
                icon="utensils",
            )]
    return []


STAGES: Tuple[Stage, ...] = (
    Stage("allergy", check_allergies, blocking=True),
    Stage("intolerance", check_intolerances, blocking=True),
    Stage("diet_pattern", check_diet_pattern, blocking=True),
    Stage("egg_days", check_egg_days, blocking=True),
    Stage("food_restrictions", check_food_restrictions, blocking=True),
    Stage("medical", check_medical_conditions),
    Stage("lab_derived", check_lab_markers),
    Stage("dislike", check_dislikes),
    Stage("avoid_category", check_avoided_categories),
    Stage("meal_suitability", check_meal_suitability),
    Stage("repetition", check_plan_repetition),
    Stage("nutrition_strength", check_plan_nutrition),
    Stage("liked_food", check_liked_foods),
    Stage("preferred_cuisine", check_preferred_cuisines),
)


def aggregate_severity(alerts: List[ValidationAlert]) -> Severity:
    """Most severe alert wins; GREEN when there are none."""
    severity = Severity.GREEN
    for alert in alerts:
        if alert.severity.rank > severity.rank:
            severity = alert.severity
    return severity


def run_pipeline(rule: RuleInput, stages: Tuple[Stage, ...] = STAGES) -> Tuple[Severity, List[ValidationAlert]]:
    """Fold `stages` over `rule` and return (aggregate severity, alerts).

    A blocking stage that yields a RED alert keeps its alerts up to and
    including that RED one and ends the fold.
    """
    alerts: List[ValidationAlert] = []
    for stage in stages:
        produced = stage.check(rule)
        if stage.blocking:
            for index, alert in enumerate(produced):
                if alert.severity == Severity.RED:
                    alerts.extend(produced[:index + 1])
                    return Severity.RED, alerts
        alerts.extend(produced)
    return aggregate_severity(alerts), alerts
