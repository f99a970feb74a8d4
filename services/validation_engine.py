"""Food validation engine.

Answers "can this food go into this client's plan, here?" with a RED /
YELLOW / GREEN verdict and the alerts behind it. The engine owns its client
tag cache; stores and settings are injected so several engines (one per
test, say) never share state.
"""

import asyncio
import time
from typing import Any, Dict, List, Optional, Sequence

from core.config import ValidationSettings, get_settings
from core.exceptions import NotFoundError, ValidationError
from core.logger import get_logger
from database import ReadSessionLocal
from schemas.restriction_schema import normalize_id
from schemas.validation_schema import (
    BatchValidationResult,
    Severity,
    ValidationAlert,
    ValidationContext,
    ValidationResult,
)
from services.plan_context import PlanContext
from services.rule_pipeline import RuleInput, run_pipeline
from services.stores import (
    ClientStore,
    FoodStore,
    PlanStore,
    SQLAlchemyClientStore,
    SQLAlchemyFoodStore,
    SQLAlchemyPlanStore,
)
from services.tag_cache import ClientTagCache
from services.tag_extraction import ClientTagSet, FoodTagSet, extract_client_tags, extract_food_tags

logger = get_logger("services.validation_engine")

BORDER_COLORS = {Severity.RED: "red", Severity.YELLOW: "yellow", Severity.GREEN: "green"}


class ValidationEngine:
    """Validate foods for a client against the fixed rule pipeline.

    Args:
        client_store: Source of raw client records.
        food_store: Source of raw food records.
        plan_store: Source of plan targets and food usage. Without one, plan
            checks (repetition, nutrition strength) never run.
        settings: Thresholds; defaults to the environment-backed settings.
        cache: Client tag cache; a fresh one is built from `settings` if omitted.
    """

    def __init__(
        self,
        client_store: ClientStore,
        food_store: FoodStore,
        plan_store: Optional[PlanStore] = None,
        settings: Optional[ValidationSettings] = None,
        cache: Optional[ClientTagCache] = None,
    ):
        self.client_store = client_store
        self.food_store = food_store
        self.plan_store = plan_store
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else ClientTagCache(
            max_size=self.settings.cache_max_size,
            ttl_seconds=self.settings.cache_ttl_seconds,
        )

    # Tag loading

    async def get_client_tags(self, client_id: Any) -> Optional[ClientTagSet]:
        """Cached client tag set, or None if the client does not exist."""
        key = normalize_id(client_id)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Client tag cache hit: %s", key)
            return cached

        logger.debug("Client tag cache miss: %s", key)
        record = await self.client_store.get_client(key)
        if record is None:
            return None
        tags = extract_client_tags({**record, "id": key})
        self.cache.set(key, tags)
        return tags

    async def get_food_tags(self, food_id: Any) -> Optional[FoodTagSet]:
        """Food tag set, or None if the food does not exist. Never cached."""
        record = await self.food_store.get_food(normalize_id(food_id))
        if record is None:
            return None
        return extract_food_tags(record)

    async def load_plan_context(self, plan_id: Optional[str]) -> Optional[PlanContext]:
        """Load plan targets and food usage once. None when there is no plan."""
        if not plan_id or self.plan_store is None:
            return None
        targets, usage = await asyncio.gather(
            self.plan_store.get_plan_targets(plan_id),
            self.plan_store.get_plan_food_usage(plan_id),
        )
        if targets is None and not usage:
            logger.warning("Plan %s not found; skipping plan checks", plan_id)
        return PlanContext.from_usage(plan_id, targets, usage)

    # Validation

    async def validate(self, client_id: Any, food_id: Any, context: ValidationContext) -> ValidationResult:
        """Validate one food for one client.

        Raises:
            NotFoundError: If the client or the food does not exist.
        """
        client_tags, food_tags = await asyncio.gather(
            self.get_client_tags(client_id),
            self.get_food_tags(food_id),
        )
        if client_tags is None:
            raise NotFoundError("Client", str(client_id))
        if food_tags is None:
            raise NotFoundError("Food", str(food_id))

        plan = await self.load_plan_context(context.plan_id)
        result = self._evaluate(client_tags, food_tags, context, plan)
        logger.debug(
            "Validated food %s for client %s: %s (%d alerts)",
            result.food_id, client_tags.client_id, result.severity.value, len(result.alerts),
        )
        return result

    async def validate_batch(
        self, client_id: Any, food_ids: Sequence[Any], context: ValidationContext
    ) -> BatchValidationResult:
        """Validate several foods, loading the client and plan only once.

        Unknown food ids are skipped; results follow the requested order.

        Raises:
            NotFoundError: If the client does not exist.
            ValidationError: If more foods are requested than allowed.
        """
        started = time.perf_counter()
        if len(food_ids) > self.settings.max_batch_size:
            raise ValidationError(
                f"At most {self.settings.max_batch_size} foods can be validated at once",
                field="food_ids",
            )

        keys = [normalize_id(food_id) for food_id in food_ids]
        client_tags, records, plan = await asyncio.gather(
            self.get_client_tags(client_id),
            self.food_store.get_foods(keys),
            self.load_plan_context(context.plan_id),
        )
        if client_tags is None:
            raise NotFoundError("Client", str(client_id))

        foods: Dict[str, FoodTagSet] = {}
        for record in records:
            tags = extract_food_tags(record)
            foods[tags.id] = tags

        results: List[ValidationResult] = []
        for key in keys:
            food_tags = foods.get(key)
            if food_tags is None:
                logger.warning("Batch for client %s: food %s not found, skipping", client_tags.client_id, key)
                continue
            results.append(self._evaluate(client_tags, food_tags, context, plan))

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Validated %d/%d foods for client %s in %.1f ms",
            len(results), len(keys), client_tags.client_id, elapsed_ms,
        )
        return BatchValidationResult(results=results, processing_time_ms=round(elapsed_ms, 3))

    def _evaluate(
        self,
        client_tags: ClientTagSet,
        food_tags: FoodTagSet,
        context: ValidationContext,
        plan: Optional[PlanContext],
    ) -> ValidationResult:
        rule = RuleInput(client=client_tags, food=food_tags, context=context, settings=self.settings, plan=plan)
        severity, alerts = run_pipeline(rule)
        return self.build_result(food_tags, severity, alerts)

    def build_result(self, food: FoodTagSet, severity: Severity, alerts: List[ValidationAlert]) -> ValidationResult:
        return ValidationResult(
            food_id=food.id,
            food_name=food.name,
            severity=severity,
            border_color=BORDER_COLORS[severity],
            can_add=severity != Severity.RED,
            alerts=alerts,
            confidence_score=self.settings.confidence_score,
        )

    # Cache management

    def invalidate_client_cache(self, client_id: Any) -> None:
        """Forget a client's cached tags. Safe for unknown or expired ids."""
        removed = self.cache.invalidate(normalize_id(client_id))
        logger.debug("Invalidated client tag cache for %s (present=%s)", client_id, removed)

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.debug("Cleared client tag cache")


def create_validation_engine(settings: Optional[ValidationSettings] = None, session_factory=None) -> ValidationEngine:
    """Build an engine backed by the SQLAlchemy stores."""
    session_factory = session_factory or ReadSessionLocal
    return ValidationEngine(
        client_store=SQLAlchemyClientStore(session_factory),
        food_store=SQLAlchemyFoodStore(session_factory),
        plan_store=SQLAlchemyPlanStore(session_factory),
        settings=settings,
    )
