"""SQLAlchemy ORM models for the food validation service.

This module defines the records the validation engine reads: Client,
FoodItem, DietPlan, PlanMeal and MealFoodItem. List-valued tag columns are
stored as JSON-encoded strings. Models stay behavior-free; decoding and
normalisation happen in `services.stores` and `services.tag_extraction`.
"""

from sqlalchemy import Boolean, Column, Integer, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class Client(Base):
    """ORM model representing a dietitian's client.

    Every Text column holds a JSON list. `food_restrictions` is a list of
    restriction objects (see `schemas.restriction_schema`).
    """

    __tablename__ = "clients"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    allergies = Column(Text, nullable=True)
    intolerances = Column(Text, nullable=True)
    diet_pattern = Column(String, nullable=True)
    egg_allowed = Column(Boolean, nullable=False, default=True)
    egg_avoid_days = Column(Text, nullable=True)
    food_restrictions = Column(Text, nullable=True)
    dislikes = Column(Text, nullable=True)
    avoid_categories = Column(Text, nullable=True)
    medical_conditions = Column(Text, nullable=True)
    lab_derived_tags = Column(Text, nullable=True)
    liked_foods = Column(Text, nullable=True)
    preferred_cuisines = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class FoodItem(Base):
    """ORM model representing one food in the catalogue.

    Macros are per serving. Tag columns are JSON-encoded lists.
    """

    __tablename__ = "food_items"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=True)
    dietary_category = Column(String, nullable=True)
    processing_level = Column(String, nullable=True)
    serving_size_g = Column(Float, nullable=True)
    calories = Column(Float, nullable=True)
    protein_g = Column(Float, nullable=True)
    carbs_g = Column(Float, nullable=True)
    fats_g = Column(Float, nullable=True)
    fiber_g = Column(Float, nullable=True)
    sugar_g = Column(Float, nullable=True)
    sodium_mg = Column(Float, nullable=True)
    allergen_flags = Column(Text, nullable=True)
    nutrition_tags = Column(Text, nullable=True)
    health_flags = Column(Text, nullable=True)
    cuisine_tags = Column(Text, nullable=True)
    meal_suitability_tags = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class DietPlan(Base):
    """ORM model representing a client's weekly diet plan and its daily targets."""

    __tablename__ = "diet_plans"
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False)
    name = Column(String, nullable=True)
    target_calories = Column(Float, nullable=True)
    target_protein_g = Column(Float, nullable=True)
    target_carbs_g = Column(Float, nullable=True)
    target_fats_g = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class PlanMeal(Base):
    """ORM model for one meal slot of a plan. day_of_week: 0 = Sunday."""

    __tablename__ = "plan_meals"
    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey('diet_plans.id'), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=True)
    meal_type = Column(String, nullable=False)
    time_of_day = Column(String, nullable=True)


class MealFoodItem(Base):
    """ORM model linking a food item to a plan meal."""

    __tablename__ = "meal_food_items"
    id = Column(Integer, primary_key=True, index=True)
    meal_id = Column(Integer, ForeignKey('plan_meals.id'), nullable=False, index=True)
    food_id = Column(Integer, ForeignKey('food_items.id'), nullable=False)
    quantity_g = Column(Float, nullable=True)
