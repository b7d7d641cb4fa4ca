"""Time helpers shared by the store and the row mapper."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: Any) -> datetime:
    """Convert a stored timestamp into an aware UTC datetime.

    SQLite hands back ``DATETIME`` columns as text, either in SQLAlchemy's
    ``YYYY-MM-DD HH:MM:SS[.ffffff]`` form or as RFC 3339 with a ``Z`` suffix.
    Naive values are taken to already be UTC. Raises ``TypeError`` or
    ``ValueError`` when the value is not a timestamp.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Unsupported timestamp value: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


__all__ = ["to_utc", "utcnow"]
