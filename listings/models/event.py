"""Sporting event storage model and sports service wire types."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Field as ORMField, SQLModel

from .common import ListRequestOrder, Status


class EventRecord(SQLModel, table=True):
    """Stored sporting event row."""

    __tablename__ = "events"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    sport_type: str
    league: str
    country: str
    location_id: int = ORMField(index=True)
    name: str
    round: int
    game: int
    visible: bool = False
    advertised_start_time: datetime


class Event(BaseModel):
    id: int
    sport_type: str
    league: str
    country: str
    location_id: int
    name: str
    round: int
    game: int
    visible: bool
    advertised_start_time: datetime
    status: Status = Status.CLOSED

    model_config = ConfigDict(frozen=True)


class ListEventsRequestFilter(BaseModel):
    location_ids: List[int] = Field(default_factory=list)
    visible_only: bool = False

    model_config = ConfigDict(frozen=True)


class ListEventsRequest(BaseModel):
    filter: Optional[ListEventsRequestFilter] = None
    order: Optional[ListRequestOrder] = None


class ListEventsResponse(BaseModel):
    events: List[Event] = Field(default_factory=list)


class GetEventRequest(BaseModel):
    id: int


class GetEventResponse(BaseModel):
    event: Optional[Event] = None


__all__ = [
    "Event",
    "EventRecord",
    "GetEventRequest",
    "GetEventResponse",
    "ListEventsRequest",
    "ListEventsRequestFilter",
    "ListEventsResponse",
]
