"""Races store."""

from __future__ import annotations

from typing import List, Optional

from ..models import ListRacesRequestFilter, ListRequestOrder, Race
from .query import EntitySchema
from .repository import ListingRepo
from .seed import seed_races

RACE_SCHEMA = EntitySchema(
    table="races",
    columns=(
        "id",
        "meeting_id",
        "name",
        "number",
        "visible",
        "advertised_start_time",
    ),
    group_column="meeting_id",
    group_field="meeting_ids",
    record=Race,
)


class RacesRepo(ListingRepo):
    schema = RACE_SCHEMA

    def seed(self, count: int) -> None:
        seed_races(self._engine, count)

    def list(
        self,
        filter: Optional[ListRacesRequestFilter] = None,
        order: Optional[ListRequestOrder] = None,
    ) -> List[Race]:
        return super().list(filter, order)

    def get(self, record_id: int) -> Optional[Race]:
        return super().get(record_id)


__all__ = ["RACE_SCHEMA", "RacesRepo"]
