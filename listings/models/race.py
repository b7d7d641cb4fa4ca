"""Race storage model and racing service wire types."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Field as ORMField, SQLModel

from .common import ListRequestOrder, Status


class RaceRecord(SQLModel, table=True):
    """Stored race row. Status is derived at read time and never stored."""

    __tablename__ = "races"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    meeting_id: int = ORMField(index=True)
    name: str
    number: int
    visible: bool = False
    advertised_start_time: datetime


class Race(BaseModel):
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: Status = Status.CLOSED

    model_config = ConfigDict(frozen=True)


class ListRacesRequestFilter(BaseModel):
    meeting_ids: List[int] = Field(default_factory=list)
    visible_only: bool = False

    model_config = ConfigDict(frozen=True)


class ListRacesRequest(BaseModel):
    filter: Optional[ListRacesRequestFilter] = None
    order: Optional[ListRequestOrder] = None


class ListRacesResponse(BaseModel):
    races: List[Race] = Field(default_factory=list)


class GetRaceRequest(BaseModel):
    id: int


class GetRaceResponse(BaseModel):
    race: Optional[Race] = None


__all__ = [
    "GetRaceRequest",
    "GetRaceResponse",
    "ListRacesRequest",
    "ListRacesRequestFilter",
    "ListRacesResponse",
    "Race",
    "RaceRecord",
]
