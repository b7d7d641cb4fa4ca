"""Read-only repository shared by the races and events stores."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pydantic import BaseModel
from sqlalchemy.engine import Engine

from ..core.time import utcnow
from ..models import ListRequestOrder
from .query import Clock, EntitySchema, apply_filter, apply_order, scan_row, scan_rows

logger = logging.getLogger(__name__)


class ListingRepo(ABC):
    """List and fetch records of one kind from the store.

    Subclasses set ``schema`` and implement ``seed``.
    """

    schema: EntitySchema

    def __init__(self, engine: Engine, *, seed_count: int = 100, now: Clock = utcnow):
        self._engine = engine
        self._seed_count = seed_count
        self._now = now
        self._init_lock = threading.Lock()
        self._init_done = False
        self._init_error: Optional[BaseException] = None

    @abstractmethod
    def seed(self, count: int) -> None:
        """Populate the store with ``count`` synthetic rows."""

    def init(self) -> None:
        """Seed the store exactly once per repository.

        Concurrent callers block until the first call finishes and then see
        its outcome, including the same exception if seeding failed or was
        interrupted.
        """

        with self._init_lock:
            if not self._init_done:
                try:
                    self.seed(self._seed_count)
                except BaseException as exc:
                    logger.error("Seeding %s failed: %r", self.schema.table, exc)
                    self._init_error = exc
                self._init_done = True
        if self._init_error is not None:
            raise self._init_error

    def list(self, filter: Any = None, order: Optional[ListRequestOrder] = None) -> List[BaseModel]:
        query, params = apply_filter(self.schema.base_query, filter, self.schema)
        query = apply_order(query, order, self.schema.columns)
        logger.debug("list %s: %s %r", self.schema.table, query, params)

        with self._engine.connect() as conn:
            result = conn.exec_driver_sql(query, tuple(params))
            return scan_rows(result, self.schema, now=self._now)

    def get(self, record_id: int) -> Optional[BaseModel]:
        """Fetch one record by id; ``None`` when no row matches."""

        query = f"{self.schema.base_query} WHERE id = ?"
        with self._engine.connect() as conn:
            row = conn.exec_driver_sql(query, (record_id,)).first()
            return scan_row(row, self.schema, now=self._now)


__all__ = ["ListingRepo"]
