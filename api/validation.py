"""Diet validation API router.

Thin HTTP adapter over `ValidationEngine`. The engine lives on
`app.state.validation_engine` (created in the app lifespan) and is injected
through `get_validation_engine`, which tests override.
"""

from fastapi import APIRouter, Depends, Request

from core.exceptions import ConfigurationError
from core.logger import get_logger
from schemas import (
    BatchValidationRequest,
    BatchValidationResult,
    CacheInvalidationRequest,
    CacheInvalidationResponse,
    ValidationCheckRequest,
    ValidationResult,
)
from services.validation_engine import ValidationEngine

logger = get_logger("api.validation")
router = APIRouter(prefix="/api/diet-validation", tags=["diet-validation"])


def get_validation_engine(request: Request) -> ValidationEngine:
    """Return the engine created at startup."""
    engine = getattr(request.app.state, "validation_engine", None)
    if engine is None:
        raise ConfigurationError("Validation engine is not initialised", config_key="validation_engine")
    return engine


@router.post("/check", response_model=ValidationResult)
async def check_food(payload: ValidationCheckRequest, engine: ValidationEngine = Depends(get_validation_engine)):
    """Validate a single food for a client at a point in their plan.

    Raises:
        NotFoundError: If the client or food does not exist (404).
    """
    return await engine.validate(payload.client_id, payload.food_id, payload.context)


@router.post("/batch", response_model=BatchValidationResult)
async def check_foods(payload: BatchValidationRequest, engine: ValidationEngine = Depends(get_validation_engine)):
    """Validate up to 50 foods for one client; unknown foods are skipped."""
    return await engine.validate_batch(payload.client_id, payload.food_ids, payload.context)


@router.post("/invalidate-cache", response_model=CacheInvalidationResponse)
async def invalidate_cache(payload: CacheInvalidationRequest, engine: ValidationEngine = Depends(get_validation_engine)):
    """Drop one client's cached tags, or the whole cache when no client is given."""
    if payload.client_id:
        engine.invalidate_client_cache(payload.client_id)
        logger.info("Validation cache invalidated for client %s", payload.client_id)
        return CacheInvalidationResponse(success=True, message=f"Cache invalidated for client {payload.client_id}")
    engine.clear_cache()
    logger.info("Validation cache cleared")
    return CacheInvalidationResponse(success=True, message="Validation cache cleared")
