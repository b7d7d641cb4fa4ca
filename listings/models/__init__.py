"""Database model and wire type exports."""

from .common import Direction, ListRequestOrder, Status
from .event import (
    Event,
    EventRecord,
    GetEventRequest,
    GetEventResponse,
    ListEventsRequest,
    ListEventsRequestFilter,
    ListEventsResponse,
)
from .race import (
    GetRaceRequest,
    GetRaceResponse,
    ListRacesRequest,
    ListRacesRequestFilter,
    ListRacesResponse,
    Race,
    RaceRecord,
)

__all__ = [
    "Direction",
    "Event",
    "EventRecord",
    "GetEventRequest",
    "GetEventResponse",
    "GetRaceRequest",
    "GetRaceResponse",
    "ListEventsRequest",
    "ListEventsRequestFilter",
    "ListEventsResponse",
    "ListRacesRequest",
    "ListRacesRequestFilter",
    "ListRacesResponse",
    "ListRequestOrder",
    "Race",
    "RaceRecord",
    "Status",
]
