"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and a simple `init_db` helper that
creates tables and seeds the food catalogue when the DB is empty.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import json
from .models import Base, FoodItem
from data.foods_dataset import FOODS_DATA
from services.food_tagging import food_tagger

# Read/Write partitioning pattern
# In production, set WRITE_DATABASE_URL and READ_DATABASE_URL to different DB instances.
# For SQLite/demo this defaults to the same file but the interfaces are separated.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///diet.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def build_food_item(item: dict) -> FoodItem:
    """Create a FoodItem from a catalogue entry, filling tags via auto-tagging.

    Explicit values in the entry win over detected ones; detected allergen
    flags are merged with any listed ones.
    """
    tags = food_tagger.auto_tag(item)
    return FoodItem(
        name=item['name'],
        category=item.get('category'),
        dietary_category=item.get('dietary_category') or tags['dietary_category'],
        processing_level=item.get('processing_level'),
        serving_size_g=item.get('serving_size_g'),
        calories=item.get('calories'),
        protein_g=item.get('protein_g'),
        carbs_g=item.get('carbs_g'),
        fats_g=item.get('fats_g'),
        fiber_g=item.get('fiber_g'),
        sugar_g=item.get('sugar_g'),
        sodium_mg=item.get('sodium_mg'),
        allergen_flags=json.dumps(tags['allergen_flags']),
        nutrition_tags=json.dumps(item.get('nutrition_tags') or tags['nutrition_tags']),
        health_flags=json.dumps(item.get('health_flags') or tags['health_flags']),
        cuisine_tags=json.dumps(item.get('cuisine_tags', [])),
        meal_suitability_tags=json.dumps(item.get('meal_suitability_tags', [])),
    )


def init_db(engine=None, session_factory=None):
    """Initialize database schema and seed the food catalogue.

    Creates all tables using SQLAlchemy models and populates the food_items
    table with the default catalogue if the table is empty.
    """
    engine = engine or write_engine
    session_factory = session_factory or WriteSessionLocal
    Base.metadata.create_all(bind=engine)
    session = session_factory()
    try:
        count = session.query(FoodItem).count()
        if count == 0:
            for item in FOODS_DATA:
                session.add(build_food_item(item))
            session.commit()
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
