"""Service layer helpers."""

from .events import EVENT_SCHEMA, EventsRepo
from .query import (
    EntitySchema,
    ListingError,
    RowConversionError,
    apply_filter,
    apply_order,
    safe_column,
    scan_row,
    scan_rows,
)
from .races import RACE_SCHEMA, RacesRepo
from .racing import RacingService
from .repository import ListingRepo
from .seed import seed_events, seed_races
from .sports import SportsService

__all__ = [
    "EVENT_SCHEMA",
    "EntitySchema",
    "EventsRepo",
    "ListingError",
    "ListingRepo",
    "RACE_SCHEMA",
    "RacesRepo",
    "RacingService",
    "RowConversionError",
    "SportsService",
    "apply_filter",
    "apply_order",
    "safe_column",
    "scan_row",
    "scan_rows",
    "seed_events",
    "seed_races",
]
