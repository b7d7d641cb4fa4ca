"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    SEED_COUNT,
    SEED_ON_STARTUP,
    configure_logging,
    engine as default_engine,
)
from .services import EventsRepo, RacesRepo, RacingService, SportsService

logger = logging.getLogger(__name__)


def create_app(
    engine: Optional[Engine] = None,
    *,
    seed: bool = SEED_ON_STARTUP,
    seed_count: int = SEED_COUNT,
    reset: bool = DB_RESET,
) -> FastAPI:
    configure_logging(LOG_LEVEL)
    engine = engine or default_engine

    races_repo = RacesRepo(engine, seed_count=seed_count)
    events_repo = EventsRepo(engine, seed_count=seed_count)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if reset:
            SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
        if seed:
            races_repo.init()
            events_repo.init()
        logger.info("Listing API ready (seed=%s)", seed)
        yield

    app = FastAPI(title="Racing & Sports Listing API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.racing_service = RacingService(races_repo)
    app.state.sports_service = SportsService(events_repo)

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("listings.app:app", host=HOST, port=PORT)
