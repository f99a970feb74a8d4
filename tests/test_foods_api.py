"""HTTP tests for the food catalogue router against a temporary SQLite DB."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from api.foods import router
from core.error_handlers import register_exception_handlers
from database import init_db, models
from database.deps import get_db_read, get_db_write


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'foods.db'}", connect_args={"check_same_thread": False})
    factory = sessionmaker(bind=engine)
    init_db(engine=engine, session_factory=factory)
    yield factory
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def override():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    app.dependency_overrides[get_db_read] = override
    app.dependency_overrides[get_db_write] = override
    return TestClient(app)


def test_list_foods_decodes_tags(client):
    """Test that the food list returns decoded tag lists."""
    response = client.get("/api/foods")
    assert response.status_code == 200
    foods = {f["name"]: f for f in response.json()}
    assert "eggs" in foods["Egg Omelette"]["allergen_flags"]
    assert foods["Samosa (1 pc)"]["processing_level"] == "fried"


def test_auto_tag_persists_tags(client, session_factory):
    """Test that auto-tagging writes the tags back to the row."""
    session = session_factory()
    try:
        food = models.FoodItem(name="Masala Omelette", calories=180, protein_g=12, fats_g=14, allergen_flags=json.dumps([]))
        session.add(food)
        session.commit()
        food_id = food.id
    finally:
        session.close()

    response = client.post(f"/api/foods/{food_id}/auto-tag")
    assert response.status_code == 200
    body = response.json()
    assert body["dietary_category"] == "veg_with_egg"
    assert "eggs" in body["allergen_flags"]

    session = session_factory()
    try:
        stored = session.get(models.FoodItem, food_id)
        assert stored.dietary_category == "veg_with_egg"
        assert "eggs" in json.loads(stored.allergen_flags)
    finally:
        session.close()


def test_auto_tag_unknown_food_is_404(client):
    """Test that auto-tagging an unknown food returns 404."""
    response = client.post("/api/foods/99999/auto-tag")
    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource"] == "Food"
