"""Sporting events store."""

from __future__ import annotations

from typing import List, Optional

from ..models import Event, ListEventsRequestFilter, ListRequestOrder
from .query import EntitySchema
from .repository import ListingRepo
from .seed import seed_events

EVENT_SCHEMA = EntitySchema(
    table="events",
    columns=(
        "id",
        "sport_type",
        "league",
        "country",
        "location_id",
        "name",
        "round",
        "game",
        "visible",
        "advertised_start_time",
    ),
    group_column="location_id",
    group_field="location_ids",
    record=Event,
)


class EventsRepo(ListingRepo):
    schema = EVENT_SCHEMA

    def seed(self, count: int) -> None:
        seed_events(self._engine, count)

    def list(
        self,
        filter: Optional[ListEventsRequestFilter] = None,
        order: Optional[ListRequestOrder] = None,
    ) -> List[Event]:
        return super().list(filter, order)

    def get(self, record_id: int) -> Optional[Event]:
        return super().get(record_id)


__all__ = ["EVENT_SCHEMA", "EventsRepo"]
