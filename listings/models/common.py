"""Wire types shared by the racing and sports services."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Status(str, Enum):
    """Derived state of a listing; CLOSED is the default."""

    CLOSED = "CLOSED"
    OPEN = "OPEN"


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class ListRequestOrder(BaseModel):
    """Requested sort column and direction.

    ``field`` is untrusted; it only reaches SQL text after an allow-list check.
    """

    field: str = ""
    direction: Direction = Direction.ASC

    model_config = ConfigDict(frozen=True)


__all__ = ["Direction", "ListRequestOrder", "Status"]
