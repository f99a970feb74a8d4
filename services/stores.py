"""Record stores consumed by the validation engine.

The engine only depends on the abstract async interfaces below. The
SQLAlchemy implementations run synchronous ORM queries in the threadpool so
that a client lookup and a food lookup can be awaited together.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session, sessionmaker

from core.logger import get_logger
from database import models
from services.plan_context import PlanTargets

logger = get_logger("services.stores")

CLIENT_LIST_FIELDS = (
    "allergies", "intolerances", "egg_avoid_days", "food_restrictions", "dislikes",
    "avoid_categories", "medical_conditions", "lab_derived_tags", "liked_foods",
    "preferred_cuisines",
)
FOOD_LIST_FIELDS = (
    "allergen_flags", "nutrition_tags", "health_flags", "cuisine_tags", "meal_suitability_tags",
)
FOOD_SCALAR_FIELDS = (
    "name", "category", "dietary_category", "processing_level",
    "calories", "protein_g", "carbs_g", "fats_g",
)


class ClientStore(ABC):
    @abstractmethod
    async def get_client(self, client_id: str) -> Optional[Dict[str, Any]]:
        """Return the raw client record, or None if the client is unknown."""


class FoodStore(ABC):
    @abstractmethod
    async def get_food(self, food_id: str) -> Optional[Dict[str, Any]]:
        """Return the raw food record, or None if the food is unknown."""

    @abstractmethod
    async def get_foods(self, food_ids: Sequence[str]) -> List[Dict[str, Any]]:
        """Return the records of the foods that exist, in any order."""


class PlanStore(ABC):
    @abstractmethod
    async def get_plan_targets(self, plan_id: str) -> Optional[PlanTargets]:
        """Daily macro targets of a plan, or None if the plan is unknown."""

    @abstractmethod
    async def get_plan_food_usage(self, plan_id: str) -> List[Tuple[str, Optional[int]]]:
        """(food_id, day_of_week) for every food placed in the plan's meals."""


def decode_list(raw: Optional[str]) -> List[Any]:
    """Decode a JSON list column. Empty, null or malformed values give []."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed JSON list column: %r", raw[:80])
        return []
    return value if isinstance(value, list) else []


def _to_pk(identifier: str) -> Optional[int]:
    try:
        return int(identifier)
    except (TypeError, ValueError):
        return None


def client_to_record(client: models.Client) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": str(client.id),
        "name": client.name,
        "diet_pattern": client.diet_pattern,
        "egg_allowed": client.egg_allowed,
    }
    for field in CLIENT_LIST_FIELDS:
        record[field] = decode_list(getattr(client, field))
    return record


def food_to_record(food: models.FoodItem) -> Dict[str, Any]:
    record: Dict[str, Any] = {"id": str(food.id)}
    for field in FOOD_SCALAR_FIELDS:
        record[field] = getattr(food, field)
    for field in FOOD_LIST_FIELDS:
        record[field] = decode_list(getattr(food, field))
    return record


class _SessionBacked:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()


class SQLAlchemyClientStore(_SessionBacked, ClientStore):
    def _load(self, client_id: str) -> Optional[Dict[str, Any]]:
        pk = _to_pk(client_id)
        if pk is None:
            return None
        session = self._session()
        try:
            client = session.get(models.Client, pk)
            return client_to_record(client) if client else None
        finally:
            session.close()

    async def get_client(self, client_id: str) -> Optional[Dict[str, Any]]:
        return await run_in_threadpool(self._load, client_id)


class SQLAlchemyFoodStore(_SessionBacked, FoodStore):
    def _load_one(self, food_id: str) -> Optional[Dict[str, Any]]:
        pk = _to_pk(food_id)
        if pk is None:
            return None
        session = self._session()
        try:
            food = session.get(models.FoodItem, pk)
            return food_to_record(food) if food else None
        finally:
            session.close()

    def _load_many(self, food_ids: Sequence[str]) -> List[Dict[str, Any]]:
        pks = [pk for pk in (_to_pk(f) for f in food_ids) if pk is not None]
        if not pks:
            return []
        session = self._session()
        try:
            foods = session.query(models.FoodItem).filter(models.FoodItem.id.in_(pks)).all()
            return [food_to_record(f) for f in foods]
        finally:
            session.close()

    async def get_food(self, food_id: str) -> Optional[Dict[str, Any]]:
        return await run_in_threadpool(self._load_one, food_id)

    async def get_foods(self, food_ids: Sequence[str]) -> List[Dict[str, Any]]:
        return await run_in_threadpool(self._load_many, list(food_ids))


class SQLAlchemyPlanStore(_SessionBacked, PlanStore):
    def _load_targets(self, plan_id: str) -> Optional[PlanTargets]:
        pk = _to_pk(plan_id)
        if pk is None:
            return None
        session = self._session()
        try:
            plan = session.get(models.DietPlan, pk)
            if plan is None:
                return None
            return PlanTargets(
                calories=plan.target_calories,
                protein_g=plan.target_protein_g,
                carbs_g=plan.target_carbs_g,
                fats_g=plan.target_fats_g,
            )
        finally:
            session.close()

    def _load_usage(self, plan_id: str) -> List[Tuple[str, Optional[int]]]:
        pk = _to_pk(plan_id)
        if pk is None:
            return []
        session = self._session()
        try:
            rows = (
                session.query(models.MealFoodItem.food_id, models.PlanMeal.day_of_week)
                .join(models.PlanMeal, models.MealFoodItem.meal_id == models.PlanMeal.id)
                .filter(models.PlanMeal.plan_id == pk)
                .all()
            )
            return [(str(food_id), day) for food_id, day in rows]
        finally:
            session.close()

    async def get_plan_targets(self, plan_id: str) -> Optional[PlanTargets]:
        return await run_in_threadpool(self._load_targets, plan_id)

    async def get_plan_food_usage(self, plan_id: str) -> List[Tuple[str, Optional[int]]]:
        return await run_in_threadpool(self._load_usage, plan_id)
