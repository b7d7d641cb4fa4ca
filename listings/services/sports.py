"""Sports service: request/response envelopes around the events store."""

from __future__ import annotations

from ..models import (
    GetEventRequest,
    GetEventResponse,
    ListEventsRequest,
    ListEventsResponse,
)
from .events import EventsRepo


class SportsService:
    def __init__(self, events_repo: EventsRepo):
        self.events_repo = events_repo

    def list_events(self, request: ListEventsRequest) -> ListEventsResponse:
        events = self.events_repo.list(request.filter, request.order)
        return ListEventsResponse(events=events)

    def get_event(self, request: GetEventRequest) -> GetEventResponse:
        return GetEventResponse(event=self.events_repo.get(request.id))


__all__ = ["SportsService"]
