"""Tests for ValidationEngine: lookups, caching, plan loading and batches."""

import pytest

from core.exceptions import NotFoundError, ValidationError
from schemas.validation_schema import AlertType, Severity
from services.plan_context import PlanTargets
from services.validation_engine import ValidationEngine
from tests.factories import (
    MemoryClientStore,
    MemoryFoodStore,
    MemoryPlanStore,
    client_record,
    context,
    food_record,
    settings,
)

VEG_CLIENT = client_record("1", diet_pattern="vegetarian", egg_avoid_days=["tuesday"], egg_allowed=True)
CHICKEN = food_record("10", "Chicken Curry", dietary_category="non_veg")
OMELETTE = food_record("11", "Egg Omelette", dietary_category="veg_with_egg", allergen_flags=["eggs"])
DAL = food_record("12", "Dal Tadka", dietary_category="vegetarian", calories=600, protein_g=10)


def make_engine(*clients, foods=(CHICKEN, OMELETTE, DAL), plan_store=None, **overrides):
    return ValidationEngine(
        client_store=MemoryClientStore(*(clients or (VEG_CLIENT,))),
        food_store=MemoryFoodStore(*foods),
        plan_store=plan_store,
        settings=settings(**overrides),
    )


@pytest.mark.asyncio
async def test_vegetarian_client_and_non_veg_food_is_red():
    """Test that a vegetarian client gets RED for non-veg food."""
    result = await make_engine().validate("1", "10", context())
    assert result.severity == Severity.RED
    assert result.can_add is False
    assert result.border_color == "red"
    assert [a.type for a in result.alerts] == [AlertType.DIET_PATTERN]
    assert result.food_name == "Chicken Curry"
    assert result.confidence_score == 0.95


@pytest.mark.asyncio
async def test_egg_avoid_day_depends_on_current_day():
    """Test that the egg-avoid day depends on the current day."""
    engine = make_engine()
    tuesday = await engine.validate("1", "11", context(day="tuesday"))
    saturday = await engine.validate("1", "11", context(day="Saturday"))
    assert tuesday.severity == Severity.RED
    assert tuesday.alerts[0].type == AlertType.DAY_RESTRICTION
    assert saturday.severity != Severity.RED
    assert saturday.can_add is True


@pytest.mark.asyncio
async def test_restriction_excludes_win_over_positive_match():
    """Test that excludes carve foods out of a matching restriction."""
    client = client_record("2", food_restrictions=[{
        "foodCategory": "non_veg", "restrictionType": "day_based",
        "avoidDays": ["tuesday"], "excludes": ["eggs"], "severity": "strict",
    }])
    egg_dish = food_record("20", "Egg Bhurji", dietary_category="non_veg", allergen_flags=["eggs"])
    engine = make_engine(client, foods=(egg_dish, CHICKEN))

    assert (await engine.validate("2", "20", context(day="tuesday"))).severity != Severity.RED
    assert (await engine.validate("2", "10", context(day="tuesday"))).severity == Severity.RED


@pytest.mark.asyncio
async def test_unknown_client_or_food_raises_not_found():
    """Test that unknown clients and foods raise NotFoundError."""
    engine = make_engine()
    with pytest.raises(NotFoundError) as exc_info:
        await engine.validate("404", "10", context())
    assert exc_info.value.resource == "Client"
    assert exc_info.value.status_code == 404

    with pytest.raises(NotFoundError) as exc_info:
        await engine.validate("1", "999", context())
    assert exc_info.value.resource == "Food"


@pytest.mark.asyncio
async def test_validate_is_idempotent_and_uses_cache():
    """Test that repeat calls agree and hit the cache."""
    engine = make_engine()
    first = await engine.validate(1, 12, context())
    second = await engine.validate("1", "12", context())
    assert first == second
    assert engine.client_store.calls == 1


@pytest.mark.asyncio
async def test_invalidation_reflects_updated_client_data():
    """Test that invalidation picks up changed client data."""
    engine = make_engine()
    assert (await engine.validate("1", "12", context())).severity == Severity.GREEN

    engine.client_store.records["1"]["allergies"] = ["lentils"]
    engine.food_store.records["12"]["allergen_flags"] = ["lentils"]
    # stale tags until invalidated
    assert (await engine.validate("1", "12", context())).severity == Severity.GREEN

    engine.invalidate_client_cache("1")
    result = await engine.validate("1", "12", context())
    assert result.severity == Severity.RED
    assert result.alerts[0].type == AlertType.ALLERGY

    engine.invalidate_client_cache("never-cached")


@pytest.mark.asyncio
async def test_clear_cache_forces_reload():
    """Test that clear_cache forces a reload."""
    engine = make_engine()
    await engine.get_client_tags("1")
    engine.clear_cache()
    await engine.get_client_tags("1")
    assert engine.client_store.calls == 2


@pytest.mark.asyncio
async def test_engines_do_not_share_caches():
    """Test that each engine owns its cache."""
    a, b = make_engine(), make_engine()
    await a.get_client_tags("1")
    assert len(a.cache) == 1
    assert len(b.cache) == 0


@pytest.mark.asyncio
async def test_plan_checks_need_plan_id():
    """Test that plan checks run only with a plan id."""
    plans = MemoryPlanStore()
    plans.add_plan("7", PlanTargets(calories=1000, protein_g=100), usage=[("12", d) for d in (0, 2, 4, 6)])
    engine = make_engine(plan_store=plans)

    with_plan = await engine.validate("1", "12", context(plan_id=7))
    assert with_plan.severity == Severity.YELLOW
    alert_types = [a.type for a in with_plan.alerts]
    assert AlertType.REPETITION in alert_types
    assert AlertType.NUTRITION_STRENGTH in alert_types
    assert any("60%" in a.message for a in with_plan.alerts)

    without_plan = await engine.validate("1", "12", context())
    assert without_plan.alerts == []


@pytest.mark.asyncio
async def test_unknown_plan_skips_plan_checks():
    """Test that an unknown plan skips plan checks."""
    engine = make_engine(plan_store=MemoryPlanStore())
    result = await engine.validate("1", "12", context(plan_id="missing"))
    assert result.alerts == []


@pytest.mark.asyncio
async def test_batch_matches_single_validation():
    """Test that batch results match single validations."""
    plans = MemoryPlanStore()
    plans.add_plan("7", PlanTargets(calories=1000), usage=[("12", 1), ("12", 2), ("12", 3)])
    engine = make_engine(plan_store=plans)
    ctx = context(day="tuesday", plan_id="7")

    batch = await engine.validate_batch("1", ["10", "11", "12"], ctx)
    singles = [await engine.validate("1", food_id, ctx) for food_id in ("10", "11", "12")]

    assert [r.food_id for r in batch.results] == ["10", "11", "12"]
    for from_batch, single in zip(batch.results, singles):
        assert from_batch.severity == single.severity
        assert [a.type for a in from_batch.alerts] == [a.type for a in single.alerts]
    assert batch.processing_time_ms >= 0


@pytest.mark.asyncio
async def test_batch_loads_client_and_plan_once():
    """Test that a batch loads the client and plan once."""
    plans = MemoryPlanStore()
    plans.add_plan("7", PlanTargets(calories=1000))
    engine = make_engine(plan_store=plans)
    await engine.validate_batch("1", ["10", "11", "12"], context(plan_id="7"))
    assert engine.client_store.calls == 1
    assert plans.calls == 1


@pytest.mark.asyncio
async def test_batch_skips_unknown_foods_and_keeps_order():
    """Test that a batch skips unknown foods and keeps order."""
    engine = make_engine()
    batch = await engine.validate_batch("1", ["12", "nope", "10"], context())
    assert [r.food_id for r in batch.results] == ["12", "10"]


@pytest.mark.asyncio
async def test_batch_errors():
    """Test batch errors for unknown clients and oversized batches."""
    engine = make_engine(max_batch_size=2)
    with pytest.raises(NotFoundError):
        await engine.validate_batch("404", ["10"], context())
    with pytest.raises(ValidationError):
        await engine.validate_batch("1", ["10", "11", "12"], context())


@pytest.mark.asyncio
async def test_cache_keys_ignore_id_formatting():
    """Tags cached under "01" are dropped by invalidating client "1"."""
    engine = make_engine()
    await engine.get_client_tags("01")
    await engine.get_client_tags(1)
    assert engine.client_store.calls == 1

    engine.invalidate_client_cache("1")
    assert len(engine.cache) == 0
    await engine.get_client_tags(" 1 ")
    assert engine.client_store.calls == 2


@pytest.mark.asyncio
async def test_batch_accepts_padded_food_ids():
    """Padded food ids are validated, not skipped, and reported in canonical form."""
    engine = make_engine()
    batch = await engine.validate_batch("1", ["012", "010"], context())
    assert [r.food_id for r in batch.results] == ["12", "10"]
    assert (await engine.validate("1", "012", context())).food_id == "12"
