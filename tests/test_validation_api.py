"""HTTP tests for the diet validation router.

The engine dependency is overridden with one backed by in-memory stores, so
no database is touched.
"""

import inspect

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.validation import get_validation_engine, invalidate_cache, router
from core.error_handlers import register_exception_handlers
from services.validation_engine import ValidationEngine
from tests.factories import MemoryClientStore, MemoryFoodStore, client_record, food_record, settings


@pytest.fixture
def engine():
    return ValidationEngine(
        client_store=MemoryClientStore(client_record("1", diet_pattern="vegetarian", allergies=["peanuts"])),
        food_store=MemoryFoodStore(
            food_record("10", "Chicken Curry", dietary_category="non_veg"),
            food_record("11", "Dal Tadka", dietary_category="vegetarian"),
        ),
        settings=settings(),
    )


@pytest.fixture
def client(engine):
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    app.dependency_overrides[get_validation_engine] = lambda: engine
    return TestClient(app)


CONTEXT = {"current_day": "Monday", "meal_type": "lunch"}


def test_check_returns_verdict(client):
    """Test that /check returns the verdict for one food."""
    response = client.post("/api/diet-validation/check", json={"client_id": 1, "food_id": 10, "context": CONTEXT})
    assert response.status_code == 200
    body = response.json()
    assert body["food_id"] == "10"
    assert body["severity"] == "RED"
    assert body["can_add"] is False
    assert body["border_color"] == "red"
    assert body["alerts"][0]["type"] == "diet_pattern"


def test_check_unknown_food_is_404(client):
    """Test that an unknown food returns 404."""
    response = client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "999", "context": CONTEXT})
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["details"]["resource"] == "Food"


def test_check_rejects_bad_context(client):
    """Test that a bad day or time returns 422."""
    bad_day = {"current_day": "someday", "meal_type": "lunch"}
    response = client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "10", "context": bad_day})
    assert response.status_code == 422

    bad_time = dict(CONTEXT, scheduled_time="7pm")
    response = client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "10", "context": bad_time})
    assert response.status_code == 422


def test_batch_validates_in_order(client):
    """Test that /batch keeps order and skips unknown foods."""
    response = client.post(
        "/api/diet-validation/batch",
        json={"client_id": "1", "food_ids": ["11", "10", "404"], "context": CONTEXT},
    )
    assert response.status_code == 200
    body = response.json()
    assert [r["food_id"] for r in body["results"]] == ["11", "10"]
    assert [r["severity"] for r in body["results"]] == ["GREEN", "RED"]
    assert "processing_time_ms" in body


def test_batch_size_limits(client):
    """Test that empty or oversized batches return 422."""
    empty = client.post("/api/diet-validation/batch", json={"client_id": "1", "food_ids": [], "context": CONTEXT})
    assert empty.status_code == 422

    too_many = [str(i) for i in range(51)]
    response = client.post("/api/diet-validation/batch", json={"client_id": "1", "food_ids": too_many, "context": CONTEXT})
    assert response.status_code == 422


def test_invalidate_single_client_and_whole_cache(client, engine):
    """Test invalidating one client and clearing the cache."""
    client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "11", "context": CONTEXT})
    assert len(engine.cache) == 1

    response = client.post("/api/diet-validation/invalidate-cache", json={"client_id": "1"})
    assert response.json() == {"success": True, "message": "Cache invalidated for client 1"}
    assert len(engine.cache) == 0

    client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "11", "context": CONTEXT})
    response = client.post("/api/diet-validation/invalidate-cache", json={})
    assert response.json()["success"] is True
    assert len(engine.cache) == 0


def test_missing_engine_is_a_configuration_error():
    """Test that a missing engine is reported as a configuration error."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    response = TestClient(app).post(
        "/api/diet-validation/check", json={"client_id": "1", "food_id": "10", "context": CONTEXT},
    )
    assert response.status_code == 500
    assert "not initialised" in response.json()["error"]["message"]


def test_invalidate_cache_runs_on_the_event_loop():
    """The invalidation route is a coroutine, so it never touches the cache from a worker thread."""
    assert inspect.iscoroutinefunction(invalidate_cache)


def test_check_rejects_null_meal_type(client):
    """A null meal_type is rejected instead of becoming the string "none"."""
    context = dict(CONTEXT, meal_type=None)
    response = client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "10", "context": context})
    assert response.status_code == 422

    context = dict(CONTEXT, current_day=None)
    response = client.post("/api/diet-validation/check", json={"client_id": "1", "food_id": "10", "context": context})
    assert response.status_code == 422
