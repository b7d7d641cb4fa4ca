"""Dynamic list-query construction and row materialization.

Races and events are listed through the same pipeline, parametrised by an
``EntitySchema``:

    base query -> apply_filter -> apply_order -> execute -> scan_rows

Only allow-listed column names are ever interpolated into SQL text. Filter
values always travel as positional ``?`` parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Type

from pydantic import BaseModel, ValidationError

from ..core.time import to_utc, utcnow
from ..models import Direction, ListRequestOrder, Status

logger = logging.getLogger(__name__)

START_TIME_COLUMN = "advertised_start_time"

Clock = Callable[[], Any]


class ListingError(Exception):
    """Base class for listing failures raised by this package."""


class RowConversionError(ListingError, ValueError):
    """A stored row could not be mapped onto its record type."""


@dataclass(frozen=True)
class EntitySchema:
    """Per-kind description of the listing pipeline.

    ``columns`` is both the SELECT list (scan order) and the ORDER BY
    allow-list. ``group_field`` names the attribute on the request filter that
    carries the identifiers matched against ``group_column``.
    """

    table: str
    columns: Tuple[str, ...]
    group_column: str
    group_field: str
    record: Type[BaseModel]

    @property
    def base_query(self) -> str:
        return f"SELECT {', '.join(self.columns)} FROM {self.table}"


def safe_column(allowed: Iterable[str], field: Optional[str]) -> Optional[str]:
    """Return ``field`` if it is one of the allowed column names, else ``None``."""

    if not field:
        return None
    for column in allowed:
        if column == field:
            return column
    return None


def apply_filter(query: str, filter: Any, schema: EntitySchema) -> Tuple[str, List[Any]]:
    """Append a WHERE clause built from the request filter.

    Returns the query and the positional parameters for its placeholders.
    An absent or empty filter leaves the query untouched.
    """

    params: List[Any] = []
    if filter is None:
        return query, params

    clauses: List[str] = []

    group_ids = list(getattr(filter, schema.group_field) or [])
    if group_ids:
        placeholders = ", ".join("?" for _ in group_ids)
        clauses.append(f"{schema.group_column} IN ({placeholders})")
        params.extend(group_ids)

    if filter.visible_only:
        clauses.append("visible = 1")

    if clauses:
        query += " WHERE " + " AND ".join(clauses)

    return query, params


def apply_order(
    query: str, order: Optional[ListRequestOrder], allowed: Iterable[str]
) -> str:
    """Append ORDER BY for an allow-listed field; anything else is dropped."""

    if order is None:
        return query

    column = safe_column(allowed, order.field)
    if column is None:
        if order.field:
            logger.debug("Ignoring order field not in allow-list: %r", order.field)
        return query

    direction = Direction(order.direction)
    return f"{query} ORDER BY {column} {direction.value}"


def derive_status(start_time: Any, now: Clock = utcnow) -> Status:
    """OPEN while the start time is strictly in the future, CLOSED otherwise."""

    if now() < start_time:
        return Status.OPEN
    return Status.CLOSED


def scan_row(
    row: Optional[Sequence[Any]], schema: EntitySchema, now: Clock = utcnow
) -> Optional[BaseModel]:
    """Map one result row onto ``schema.record``.

    A missing row (``None``) is a successful lookup with no match.
    """

    if row is None:
        return None

    if len(row) != len(schema.columns):
        raise TypeError(
            f"{schema.table}: expected {len(schema.columns)} columns, got {len(row)}"
        )

    values = dict(zip(schema.columns, row))

    try:
        start_time = to_utc(values[START_TIME_COLUMN])
    except (TypeError, ValueError) as exc:
        raise RowConversionError(
            f"{schema.table} id={values.get('id')!r}: bad {START_TIME_COLUMN} "
            f"{values[START_TIME_COLUMN]!r}"
        ) from exc
    values[START_TIME_COLUMN] = start_time

    try:
        return schema.record(**values, status=derive_status(start_time, now))
    except ValidationError as exc:
        raise RowConversionError(f"{schema.table} id={values.get('id')!r}: {exc}") from exc


def scan_rows(
    rows: Iterable[Sequence[Any]], schema: EntitySchema, now: Clock = utcnow
) -> List[BaseModel]:
    """Materialize every row; the first failure aborts the whole batch.

    ``now`` is read once per row, so a long scan can straddle a start time.
    """

    records: List[BaseModel] = []
    for row in rows:
        records.append(scan_row(row, schema, now))
    return records


__all__ = [
    "EntitySchema",
    "ListingError",
    "RowConversionError",
    "START_TIME_COLUMN",
    "apply_filter",
    "apply_order",
    "derive_status",
    "safe_column",
    "scan_row",
    "scan_rows",
]
