from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlmodel import Session, SQLModel

from listings.core import make_engine
from listings.models import EventRecord, RaceRecord


def _utc_from_now(delta: timedelta) -> datetime:
    return datetime.now(timezone.utc) + delta


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'listings.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def races(engine):
    """Four races across two meetings, two in the past and two upcoming."""

    rows = [
        RaceRecord(id=1, meeting_id=1, name="Ascot Hawks", number=1, visible=True,
                   advertised_start_time=_utc_from_now(timedelta(hours=-24))),
        RaceRecord(id=2, meeting_id=1, name="Bendigo Lions", number=2, visible=False,
                   advertised_start_time=_utc_from_now(timedelta(hours=24))),
        RaceRecord(id=3, meeting_id=2, name="Caulfield Sharks", number=3, visible=True,
                   advertised_start_time=_utc_from_now(timedelta(hours=48))),
        RaceRecord(id=4, meeting_id=3, name="Doomben Titans", number=4, visible=True,
                   advertised_start_time=_utc_from_now(timedelta(hours=-2))),
    ]
    with Session(engine) as session:
        session.add_all(rows)
        session.commit()
    return rows


@pytest.fixture
def events(engine):
    rows = [
        EventRecord(id=1, sport_type="Rugby", league="Super League", country="Australia",
                    location_id=5, name="Hawks vs Lions", round=1, game=1, visible=True,
                    advertised_start_time=_utc_from_now(timedelta(hours=-24))),
        EventRecord(id=2, sport_type="Cricket", league="Metro League", country="England",
                    location_id=7, name="Sharks vs Titans", round=2, game=3, visible=False,
                    advertised_start_time=_utc_from_now(timedelta(hours=24))),
        EventRecord(id=3, sport_type="Tennis", league="Pacific League", country="Japan",
                    location_id=5, name="Wolves vs Yetis", round=3, game=2, visible=True,
                    advertised_start_time=_utc_from_now(timedelta(hours=6))),
    ]
    with Session(engine) as session:
        session.add_all(rows)
        session.commit()
    return rows
