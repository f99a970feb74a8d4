"""Policy tables for the food validation rules.

Each table maps a client-side tag (diet pattern, medical condition, lab
marker, avoided category, ...) to the food-side tags that trigger it, along
with the alert text shown to the dietitian. Rule functions in
`services.rule_pipeline` only look things up here.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from schemas.validation_schema import Severity


# --- Diet pattern conflicts ---

@dataclass(frozen=True)
class DietRule:
    """One conflict between a client diet pattern and a food category.

    `blocked` lists categories the rule fires on. When `allowed_only` is set
    the rule instead fires on every category outside it. `requires_no_egg`
    limits the rule to clients whose egg flag is off.
    """

    severity: Severity
    message: str
    icon: str
    blocked: FrozenSet[str] = frozenset()
    allowed_only: Optional[FrozenSet[str]] = None
    requires_no_egg: bool = False
    recommendation: Optional[str] = None


DIET_PATTERN_RULES: Dict[str, Tuple[DietRule, ...]] = {
    "vegetarian": (
        DietRule(Severity.RED, "VEGETARIAN: Client doesn't eat meat/fish", "leaf",
                 blocked=frozenset({"non_veg"})),
        DietRule(Severity.RED, "VEGETARIAN: Client doesn't eat eggs", "leaf",
                 blocked=frozenset({"veg_with_egg"}), requires_no_egg=True),
    ),
    "vegetarian_with_egg": (
        DietRule(Severity.RED, "VEGETARIAN: Client doesn't eat meat/fish", "leaf",
                 blocked=frozenset({"non_veg"})),
    ),
    "vegan": (
        DietRule(Severity.RED, "VEGAN: Client only eats vegan food", "sprout",
                 allowed_only=frozenset({"vegan"})),
    ),
    "jain": (
        DietRule(Severity.RED, "JAIN: Client doesn't eat meat, fish or eggs", "leaf",
                 blocked=frozenset({"non_veg", "veg_with_egg"})),
    ),
    # No fish tag exists on food records, so non-veg can only be flagged for review.
    "pescatarian": (
        DietRule(Severity.YELLOW, "PESCATARIAN: Verify this is fish-based, not meat", "fish",
                 blocked=frozenset({"non_veg"}), recommendation="Check if this is seafood"),
    ),
}


# --- Medical and lab-derived advisories ---

@dataclass(frozen=True)
class Advisory:
    """Fires when the client has any of `conditions` and the food carries any
    of `nutrition_tags` or `health_flags`."""

    conditions: FrozenSet[str]
    message: str
    icon: str
    nutrition_tags: FrozenSet[str] = frozenset()
    health_flags: FrozenSet[str] = frozenset()
    recommendation: Optional[str] = None
    severity: Severity = Severity.YELLOW


MEDICAL_ADVISORIES: Tuple[Advisory, ...] = (
    Advisory(
        conditions=frozenset({"pre_diabetes", "diabetes", "pcos"}),
        nutrition_tags=frozenset({"high_sugar"}),
        message="DIABETES CAUTION: This food is high in sugar",
        recommendation="Consider lower-sugar alternative",
        icon="heart-pulse",
    ),
    Advisory(
        conditions=frozenset({"heart_pain", "heart_disease"}),
        nutrition_tags=frozenset({"high_saturated_fat"}),
        health_flags=frozenset({"cholesterol_caution"}),
        message="HEART CAUTION: This food may be high in cholesterol/saturated fat",
        recommendation="Limit intake or choose heart-healthy alternatives",
        icon="heart",
    ),
    Advisory(
        conditions=frozenset({"hypertension"}),
        nutrition_tags=frozenset({"high_sodium"}),
        message="HYPERTENSION CAUTION: This food is high in sodium",
        recommendation="Choose low-sodium alternatives",
        icon="droplet",
    ),
    Advisory(
        conditions=frozenset({"kidney_disease", "kidney_issues"}),
        nutrition_tags=frozenset({"high_protein"}),
        health_flags=frozenset({"kidney_caution"}),
        message="KIDNEY CAUTION: This food is heavy on protein or sodium",
        recommendation="Keep portions small and spread protein across the day",
        icon="activity",
    ),
)

LAB_ADVISORIES: Tuple[Advisory, ...] = (
    Advisory(
        conditions=frozenset({"diabetic", "pre_diabetic"}),
        nutrition_tags=frozenset({"high_sugar"}),
        health_flags=frozenset({"diabetic_caution"}),
        message="LAB ALERT: Client's blood sugar markers are elevated - limit sugary foods",
        recommendation="Pair with protein or fibre, or pick a lower-sugar option",
        icon="test-tube",
    ),
    Advisory(
        conditions=frozenset({"high_cholesterol", "borderline_cholesterol"}),
        health_flags=frozenset({"cholesterol_caution"}),
        message="LAB ALERT: Client's cholesterol is elevated - limit high-cholesterol foods",
        recommendation="Maximum 2-3 times per week",
        icon="test-tube",
    ),
    Advisory(
        conditions=frozenset({"high_triglycerides", "low_hdl"}),
        nutrition_tags=frozenset({"high_fat", "high_saturated_fat"}),
        health_flags=frozenset({"heart_caution"}),
        message="LAB ALERT: Client's triglycerides are elevated - limit fatty foods",
        recommendation="Prefer grilled, steamed or baked preparations",
        icon="test-tube",
    ),
    Advisory(
        conditions=frozenset({"kidney_caution", "high_uric_acid"}),
        nutrition_tags=frozenset({"high_protein"}),
        health_flags=frozenset({"kidney_caution"}),
        message="LAB ALERT: Client's kidney/uric acid markers are elevated - limit high-protein foods",
        recommendation="Keep protein portions moderate",
        icon="test-tube",
    ),
)

# Deficiency markers paired with the food health flag that helps correct them.
NUTRIENT_NUDGES: Tuple[Advisory, ...] = (
    Advisory(
        conditions=frozenset({"vitamin_d_deficiency", "severe_vitamin_d_deficiency"}),
        health_flags=frozenset({"vitamin_d_rich"}),
        message="NUTRIENT MATCH: Good source of Vitamin D for client",
        icon="sun",
        severity=Severity.GREEN,
    ),
    Advisory(
        conditions=frozenset({"b12_deficiency"}),
        health_flags=frozenset({"b12_rich"}),
        message="NUTRIENT MATCH: Good source of Vitamin B12 for client",
        icon="pill",
        severity=Severity.GREEN,
    ),
    Advisory(
        conditions=frozenset({"iron_deficiency", "anemia"}),
        health_flags=frozenset({"iron_rich"}),
        message="NUTRIENT MATCH: Good source of iron for client",
        icon="droplet",
        severity=Severity.GREEN,
    ),
)


# --- Category avoidance ---

@dataclass(frozen=True)
class CategorySignals:
    processing_levels: FrozenSet[str] = frozenset()
    categories: FrozenSet[str] = frozenset()
    cuisine_tags: FrozenSet[str] = frozenset()


CATEGORY_MAPPING: Dict[str, CategorySignals] = {
    "fried_foods": CategorySignals(
        processing_levels=frozenset({"fried", "ultra_processed"}),
        categories=frozenset({"fried"}),
    ),
    "processed_foods": CategorySignals(processing_levels=frozenset({"processed", "ultra_processed"})),
    "ultra_processed": CategorySignals(processing_levels=frozenset({"ultra_processed"})),
    "red_meat": CategorySignals(
        categories=frozenset({"meat"}),
        cuisine_tags=frozenset({"mutton", "beef", "pork", "lamb"}),
    ),
    "sweets": CategorySignals(categories=frozenset({"sweets", "desserts"})),
    "fast_food": CategorySignals(cuisine_tags=frozenset({"fast_food"})),
    "canned_foods": CategorySignals(processing_levels=frozenset({"processed", "canned"})),
    "sugary_drinks": CategorySignals(
        categories=frozenset({"beverages"}),
        cuisine_tags=frozenset({"sugary"}),
    ),
}


# --- Meal suitability ---

MEAL_SUITABILITY_CONFLICTS: Dict[str, FrozenSet[str]] = {
    "too_heavy_for_night": frozenset({"dinner", "bedtime"}),
    "too_heavy_for_breakfast": frozenset({"breakfast"}),
    "too_light_for_lunch": frozenset({"lunch"}),
    "avoid_before_workout": frozenset({"pre_workout"}),
    "avoid_after_workout": frozenset({"post_workout"}),
}

# Minute of day assumed for a meal when the context carries no scheduled time.
MEAL_DEFAULT_MINUTES: Dict[str, int] = {
    "early_morning": 6 * 60 + 30,
    "breakfast": 8 * 60,
    "mid_morning": 10 * 60 + 30,
    "lunch": 13 * 60,
    "snack": 16 * 60 + 30,
    "evening_snack": 17 * 60 + 30,
    "dinner": 20 * 60,
    "bedtime": 22 * 60,
}


def parse_minutes(value: Optional[str]) -> Optional[int]:
    """Convert "HH:MM" into minutes after midnight."""
    if not value:
        return None
    hours, _, minutes = value.partition(":")
    try:
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return None
