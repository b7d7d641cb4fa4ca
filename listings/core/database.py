"""Database engine configuration."""

from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from .config import DATA_DIR, DATABASE_URL


def make_engine(url: str = DATABASE_URL) -> Engine:
    """Create an engine; SQLite connections may be shared across worker threads."""

    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if url == DATABASE_URL:
            DATA_DIR.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


engine = make_engine()


__all__ = ["engine", "make_engine"]
