"""Synthetic seed data for the races and events tables."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from typing import Optional, Set

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

from ..core.time import utcnow
from ..models import EventRecord, RaceRecord

logger = logging.getLogger(__name__)

_PLACES = [
    "Ascot", "Bendigo", "Caulfield", "Doomben", "Eagle Farm", "Flemington",
    "Gosford", "Hawkesbury", "Ipswich", "Kembla", "Morphettville", "Randwick",
]
_CREATURES = [
    "Bears", "Comets", "Dragons", "Falcons", "Giants", "Hawks",
    "Lions", "Panthers", "Sharks", "Titans", "Wolves", "Yetis",
]
_SPORTS = ["Basketball", "Cricket", "Football", "Hockey", "Rugby", "Tennis"]
_LEAGUES = ["Premier", "Championship", "National", "Super", "Pacific", "Metro"]
_COUNTRIES = ["Australia", "Canada", "England", "France", "Japan", "New Zealand"]


def _team(rng: random.Random) -> str:
    return f"{rng.choice(_PLACES)} {rng.choice(_CREATURES)}"


def _start_time(rng: random.Random, now: datetime) -> datetime:
    """Pick a start between one day ago and two days ahead, in UTC."""

    earliest = now - timedelta(days=1)
    span = timedelta(days=3).total_seconds()
    start = earliest + timedelta(seconds=rng.uniform(0, span))
    return start


def _existing_ids(session: Session, model) -> Set[int]:
    return set(session.exec(select(model.id)).all())


def seed_races(engine: Engine, count: int, rng: Optional[random.Random] = None) -> int:
    """Insert races with ids ``1..count`` that are not already stored."""

    rng = rng or random.Random()
    SQLModel.metadata.create_all(engine, tables=[RaceRecord.__table__])
    now = utcnow()

    with Session(engine) as session:
        existing = _existing_ids(session, RaceRecord)
        added = 0
        for race_id in range(1, count + 1):
            if race_id in existing:
                continue
            session.add(
                RaceRecord(
                    id=race_id,
                    meeting_id=rng.randint(1, 10),
                    name=_team(rng),
                    number=rng.randint(1, 12),
                    visible=bool(rng.randint(0, 1)),
                    advertised_start_time=_start_time(rng, now),
                )
            )
            added += 1
        session.commit()

    logger.info("Seeded %d races (%d already present)", added, len(existing))
    return added


def seed_events(engine: Engine, count: int, rng: Optional[random.Random] = None) -> int:
    """Insert sporting events with ids ``1..count`` that are not already stored."""

    rng = rng or random.Random()
    SQLModel.metadata.create_all(engine, tables=[EventRecord.__table__])
    now = utcnow()

    with Session(engine) as session:
        existing = _existing_ids(session, EventRecord)
        added = 0
        for event_id in range(1, count + 1):
            if event_id in existing:
                continue
            session.add(
                EventRecord(
                    id=event_id,
                    sport_type=rng.choice(_SPORTS),
                    league=f"{rng.choice(_LEAGUES)} League",
                    country=rng.choice(_COUNTRIES),
                    location_id=rng.randint(1, 20),
                    name=f"{_team(rng)} vs {_team(rng)}",
                    round=rng.randint(1, 24),
                    game=rng.randint(1, 8),
                    visible=bool(rng.randint(0, 1)),
                    advertised_start_time=_start_time(rng, now),
                )
            )
            added += 1
        session.commit()

    logger.info("Seeded %d events (%d already present)", added, len(existing))
    return added


__all__ = ["seed_events", "seed_races"]
