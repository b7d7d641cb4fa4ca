"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    SEED_COUNT,
    SEED_ON_STARTUP,
)
from .database import engine, make_engine
from .logging import configure_logging
from .time import to_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "SEED_COUNT",
    "SEED_ON_STARTUP",
    "configure_logging",
    "engine",
    "make_engine",
    "to_utc",
    "utcnow",
]
