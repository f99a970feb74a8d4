"""Builders and in-memory stores shared by the test modules."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from core.config import ValidationSettings
from schemas.validation_schema import ValidationContext
from services.plan_context import PlanTargets
from services.stores import ClientStore, FoodStore, PlanStore
from services.tag_extraction import extract_client_tags, extract_food_tags


def client_record(client_id="1", **fields) -> Dict[str, Any]:
    record = {"id": client_id, "name": "Test Client"}
    record.update(fields)
    return record


def food_record(food_id="10", name="Plain Rice", **fields) -> Dict[str, Any]:
    record = {"id": food_id, "name": name, "dietary_category": "vegan"}
    record.update(fields)
    return record


def client_tags(**fields):
    return extract_client_tags(client_record(**fields))


def food_tags(**fields):
    return extract_food_tags(food_record(**fields))


def context(day="monday", meal="lunch", plan_id=None, scheduled_time=None) -> ValidationContext:
    return ValidationContext(current_day=day, meal_type=meal, plan_id=plan_id, scheduled_time=scheduled_time)


def settings(**overrides) -> ValidationSettings:
    return ValidationSettings(**overrides)


class MemoryClientStore(ClientStore):
    def __init__(self, *records):
        self.records = {str(r["id"]): dict(r) for r in records}
        self.calls = 0

    async def get_client(self, client_id: str) -> Optional[Dict[str, Any]]:
        self.calls += 1
        record = self.records.get(client_id)
        return dict(record) if record else None


class MemoryFoodStore(FoodStore):
    def __init__(self, *records):
        self.records = {str(r["id"]): dict(r) for r in records}

    async def get_food(self, food_id: str) -> Optional[Dict[str, Any]]:
        record = self.records.get(food_id)
        return dict(record) if record else None

    async def get_foods(self, food_ids: Sequence[str]) -> List[Dict[str, Any]]:
        return [dict(self.records[f]) for f in set(food_ids) if f in self.records]


class MemoryPlanStore(PlanStore):
    def __init__(self):
        self.targets: Dict[str, PlanTargets] = {}
        self.usage: Dict[str, List[Tuple[str, Optional[int]]]] = {}
        self.calls = 0

    def add_plan(self, plan_id: str, targets: Optional[PlanTargets] = None, usage=()):
        if targets is not None:
            self.targets[plan_id] = targets
        self.usage[plan_id] = list(usage)

    async def get_plan_targets(self, plan_id: str) -> Optional[PlanTargets]:
        self.calls += 1
        return self.targets.get(plan_id)

    async def get_plan_food_usage(self, plan_id: str) -> List[Tuple[str, Optional[int]]]:
        return list(self.usage.get(plan_id, []))
