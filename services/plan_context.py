"""Plan-scoped checks: repetition across the week and nutrition strength.

Both checks need aggregates of a whole diet plan (macro targets, and where
each food already appears). Those aggregates are loaded once into a
`PlanContext` and then consulted without further I/O.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from core.config import ValidationSettings
from schemas.restriction_schema import normalize_id
from schemas.validation_schema import AlertType, Severity, ValidationAlert
from services.tag_extraction import FoodTagSet


@dataclass(frozen=True)
class PlanTargets:
    """Daily macro targets of a diet plan. Missing targets are None."""

    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fats_g: Optional[float] = None


@dataclass(frozen=True)
class PlanContext:
    """Pre-loaded aggregates for one plan.

    Attributes:
        plan_id: Plan the aggregates belong to.
        targets: Daily macro targets, or None if the plan has none.
        usage_counts: Number of meal slots each food id already occupies.
        usage_days: Day-of-week indexes (0 = Sunday) each food appears on.
    """

    plan_id: str
    targets: Optional[PlanTargets] = None
    usage_counts: Dict[str, int] = field(default_factory=dict)
    usage_days: Dict[str, FrozenSet[int]] = field(default_factory=dict)

    @classmethod
    def from_usage(
        cls,
        plan_id: str,
        targets: Optional[PlanTargets],
        usage: Iterable[Tuple[str, Optional[int]]],
    ) -> "PlanContext":
        """Aggregate (food_id, day_of_week) pairs into counts and day sets."""
        counts: Dict[str, int] = defaultdict(int)
        days: Dict[str, set] = defaultdict(set)
        for food_id, day_of_week in usage:
            key = normalize_id(food_id)
            counts[key] += 1
            if day_of_week is not None:
                days[key].add(int(day_of_week))
        return cls(
            plan_id=plan_id,
            targets=targets,
            usage_counts=dict(counts),
            usage_days={k: frozenset(v) for k, v in days.items()},
        )


def longest_consecutive_run(days: Iterable[int]) -> int:
    """Length of the longest run of consecutive day indexes.

    The week does not wrap: Saturday (6) followed by Sunday (0) is not a run.
    """
    ordered = sorted(set(days))
    if not ordered:
        return 0
    best = current = 1
    for previous, day in zip(ordered, ordered[1:]):
        if day == previous + 1:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def check_repetition(food: FoodTagSet, plan: PlanContext, settings: ValidationSettings) -> List[ValidationAlert]:
    """Warn when a food already appears too often, or on too many days in a row."""
    alerts: List[ValidationAlert] = []

    count = plan.usage_counts.get(food.id, 0)
    if count >= settings.repetition_threshold:
        alerts.append(ValidationAlert(
            type=AlertType.REPETITION,
            severity=Severity.YELLOW,
            message=f"REPETITION: This food appears {count} times this week. Consider variety.",
            recommendation="Try different foods for nutritional variety",
            icon="repeat",
        ))

    run = longest_consecutive_run(plan.usage_days.get(food.id, ()))
    if run > settings.max_consecutive_days:
        alerts.append(ValidationAlert(
            type=AlertType.REPETITION,
            severity=Severity.YELLOW,
            message=f"SPACING: This food appears on {run} consecutive days. Consider spacing it out.",
            recommendation=f"Keep it to at most {settings.max_consecutive_days} days in a row",
            icon="calendar",
        ))

    return alerts


# (label, food attribute, target attribute, unit, is_calorie_dimension)
_DIMENSIONS = (
    ("CALORIE", "calories", "calories", "kcal", True),
    ("PROTEIN", "protein_g", "protein_g", "g", False),
    ("CARB", "carbs_g", "carbs_g", "g", False),
    ("FAT", "fats_g", "fats_g", "g", False),
)


def check_nutrition_strength(food: FoodTagSet, plan: PlanContext, settings: ValidationSettings) -> List[ValidationAlert]:
    """Warn for each dimension where one serving takes too large a share of the daily target."""
    targets = plan.targets
    if targets is None:
        return []

    alerts: List[ValidationAlert] = []
    for label, food_attr, target_attr, unit, is_calorie in _DIMENSIONS:
        amount = getattr(food, food_attr)
        target = getattr(targets, target_attr)
        if amount is None or not target or target <= 0:
            continue
        share = amount / target
        limit = settings.calorie_warn_fraction if is_calorie else settings.macro_warn_fraction
        if share <= limit:
            continue
        percent = round(share * 100)
        alerts.append(ValidationAlert(
            type=AlertType.NUTRITION_STRENGTH,
            severity=Severity.YELLOW,
            message=(
                f"HIGH {label}: This food provides {percent}% of the daily "
                f"{label.lower()} target ({amount:g}{unit} of {target:g}{unit})"
            ),
            recommendation="Reduce the portion or balance the rest of the day",
            icon="gauge",
        ))
    return alerts
