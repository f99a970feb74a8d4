"""Database package: ORM models, session helpers and catalogue seeding."""

from .database import (
    write_engine,
    read_engine,
    WriteSessionLocal,
    ReadSessionLocal,
    build_food_item,
    init_db,
    get_write_session,
    get_read_session,
)
from . import models

__all__ = [
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "build_food_item",
    "init_db",
    "get_write_session",
    "get_read_session",
    "models",
]
