"""Schemas for food catalogue responses and auto-tagging."""

from pydantic import BaseModel
from typing import List, Optional


class FoodDetail(BaseModel):
    """Representation of a food item and its validation tags."""

    id: int
    name: str
    category: Optional[str] = None
    dietary_category: Optional[str] = None
    processing_level: Optional[str] = None
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fats_g: Optional[float] = None
    allergen_flags: List[str] = []
    nutrition_tags: List[str] = []
    health_flags: List[str] = []
    cuisine_tags: List[str] = []
    meal_suitability_tags: List[str] = []


class AutoTagResponse(BaseModel):
    """Tags computed and stored by the auto-tagger."""

    food_id: int
    name: str
    dietary_category: str
    allergen_flags: List[str]
    nutrition_tags: List[str]
    health_flags: List[str]
