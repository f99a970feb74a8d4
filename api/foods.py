"""Food catalogue API router.

Lists catalogue foods with their validation tags and re-runs the auto-tagger
on a single food. Food tags are never cached by the validation engine, so a
re-tag takes effect on the next validation call.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
import json
from database.deps import get_db_read, get_db_write
from core.exceptions import NotFoundError
from core.logger import get_logger
from database import models
from schemas import AutoTagResponse, FoodDetail
from services.food_tagging import food_tagger
from services.stores import decode_list

logger = get_logger("api.foods")
router = APIRouter(prefix="/api/foods", tags=["foods"])


def _food_detail(food: models.FoodItem) -> FoodDetail:
    return FoodDetail(
        id=food.id,
        name=food.name,
        category=food.category,
        dietary_category=food.dietary_category,
        processing_level=food.processing_level,
        calories=food.calories,
        protein_g=food.protein_g,
        carbs_g=food.carbs_g,
        fats_g=food.fats_g,
        allergen_flags=decode_list(food.allergen_flags),
        nutrition_tags=decode_list(food.nutrition_tags),
        health_flags=decode_list(food.health_flags),
        cuisine_tags=decode_list(food.cuisine_tags),
        meal_suitability_tags=decode_list(food.meal_suitability_tags),
    )


@router.get("", response_model=List[FoodDetail])
def list_foods(db: Session = Depends(get_db_read)):
    """Return all catalogue foods as `FoodDetail` objects."""
    return [_food_detail(f) for f in db.query(models.FoodItem).order_by(models.FoodItem.id).all()]


@router.post("/{food_id}/auto-tag", response_model=AutoTagResponse)
def auto_tag_food(food_id: int, db: Session = Depends(get_db_write)):
    """Recompute dietary category, allergens, nutrition tags and health flags.

    Raises:
        NotFoundError: If the food does not exist.
    """
    food = db.get(models.FoodItem, food_id)
    if food is None:
        raise NotFoundError("Food", food_id)

    tags = food_tagger.auto_tag({
        "name": food.name,
        "dietary_category": food.dietary_category,
        "allergen_flags": decode_list(food.allergen_flags),
        "calories": food.calories,
        "protein_g": food.protein_g,
        "carbs_g": food.carbs_g,
        "fats_g": food.fats_g,
        "fiber_g": food.fiber_g,
        "sugar_g": food.sugar_g,
        "sodium_mg": food.sodium_mg,
    })
    food.dietary_category = tags["dietary_category"]
    food.allergen_flags = json.dumps(tags["allergen_flags"])
    food.nutrition_tags = json.dumps(tags["nutrition_tags"])
    food.health_flags = json.dumps(tags["health_flags"])
    db.commit()
    logger.info("Food %s auto-tagged: %s", food_id, tags["dietary_category"])
    return AutoTagResponse(food_id=food.id, name=food.name, **tags)
