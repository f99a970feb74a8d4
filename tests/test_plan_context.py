"""Tests for plan-scoped repetition and nutrition-strength checks."""

from schemas.validation_schema import AlertType, Severity
from services.plan_context import (
    PlanContext,
    PlanTargets,
    check_nutrition_strength,
    check_repetition,
    longest_consecutive_run,
)
from tests.factories import food_tags, settings


def test_usage_is_aggregated_per_food():
    """Test that plan usage is counted per food with its distinct days."""
    plan = PlanContext.from_usage("p1", None, [("10", 1), (10, 2), ("10", 2), ("11", None)])
    assert plan.usage_counts == {"10": 3, "11": 1}
    assert plan.usage_days == {"10": frozenset({1, 2})}


def test_longest_run_does_not_wrap_the_week():
    """Test that Saturday and Sunday do not form a run."""
    assert longest_consecutive_run([]) == 0
    assert longest_consecutive_run([3]) == 1
    assert longest_consecutive_run([1, 2, 3, 5]) == 3
    assert longest_consecutive_run([6, 0]) == 1


def test_repetition_threshold_is_inclusive():
    """Test that repetition warns at exactly the threshold."""
    food = food_tags(food_id="10")
    plan = PlanContext.from_usage("p1", None, [("10", 0), ("10", 2), ("10", 4), ("10", 6)])
    alerts = check_repetition(food, plan, settings())
    assert len(alerts) == 1
    assert alerts[0].type == AlertType.REPETITION
    assert alerts[0].severity == Severity.YELLOW
    assert "4 times" in alerts[0].message

    two = PlanContext.from_usage("p1", None, [("10", 0), ("10", 2)])
    assert check_repetition(food, two, settings()) == []


def test_consecutive_days_produce_separate_spacing_alert():
    """Test that a long run of days adds a separate spacing alert."""
    food = food_tags(food_id="10")
    plan = PlanContext.from_usage("p1", None, [("10", 1), ("10", 2), ("10", 3)])
    alerts = check_repetition(food, plan, settings())
    assert len(alerts) == 2
    assert "3 times" in alerts[0].message
    assert alerts[1].message.startswith("SPACING")

    spacing_only = check_repetition(food, plan, settings(repetition_threshold=10))
    assert [a.message.split(":")[0] for a in spacing_only] == ["SPACING"]


def test_nutrition_strength_names_percentage_per_dimension():
    """Test that nutrition strength reports a percentage per dimension."""
    food = food_tags(calories=600, protein_g=50, carbs_g=20, fats_g=None)
    plan = PlanContext(plan_id="p1", targets=PlanTargets(calories=1000, protein_g=80, carbs_g=200, fats_g=50))
    alerts = check_nutrition_strength(food, plan, settings())

    assert [a.type for a in alerts] == [AlertType.NUTRITION_STRENGTH] * 2
    assert "60%" in alerts[0].message
    assert alerts[0].message.startswith("HIGH CALORIE")
    assert "62%" in alerts[1].message
    assert alerts[1].message.startswith("HIGH PROTEIN")


def test_nutrition_strength_skips_missing_targets():
    """Test that missing or zero targets are skipped."""
    food = food_tags(calories=900)
    assert check_nutrition_strength(food, PlanContext(plan_id="p1"), settings()) == []
    zero = PlanContext(plan_id="p1", targets=PlanTargets(calories=0))
    assert check_nutrition_strength(food, zero, settings()) == []


def test_exactly_at_threshold_is_not_flagged():
    """Test that a share exactly at the fraction is not flagged."""
    food = food_tags(calories=500)
    plan = PlanContext(plan_id="p1", targets=PlanTargets(calories=1000))
    assert check_nutrition_strength(food, plan, settings()) == []
