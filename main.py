"""Application entry point for the Diet Validation API.

Defines the FastAPI app, middleware, exception handlers and includes API
routers from the `api` package. The `lifespan` handler initializes the DB
and builds the validation engine on startup.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from api.foods import router as foods_router
from api.validation import router as validation_router
from core.error_handlers import register_exception_handlers
from core.exceptions import DatabaseError
from core.logger import get_logger
from database import init_db, models
from database.deps import get_db_read
from services.validation_engine import create_validation_engine

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    app.state.validation_engine = create_validation_engine()
    logger.info("Validation engine ready")
    yield
    app.state.validation_engine.clear_cache()


app = FastAPI(title="Diet Validation API", version="1.0.0", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If database connection fails.
    """
    try:
        db.query(models.FoodItem).first()
    except Exception as exc:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", operation="health") from exc
    return {"status": "healthy", "database": "connected"}


app.include_router(validation_router)
app.include_router(foods_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
