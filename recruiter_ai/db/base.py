"""
Declarative base and shared column types.

Every model imports Base from here so all tables land on one MetaData.
"""

import time
from datetime import datetime
from typing import Any, Optional

from pydantic_core import to_json
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator

from recruiter_ai.utils.time import ensure_utc


# Persisted layout version. Bumping it requires an explicit alembic migration.
SCHEMA_VERSION = 1


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UTCDateTime(TypeDecorator):
    """DateTime that always comes back timezone-aware in UTC.

    SQLite drops tzinfo on the way in, so values are normalised to UTC before
    binding and re-tagged as UTC when loaded.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return ensure_utc(value)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return ensure_utc(value)


_last_sequence = 0


def next_sequence() -> int:
    """Return a strictly increasing insertion counter.

    Seeded from the wall clock so values keep growing across process restarts.
    """
    global _last_sequence
    value = max(time.time_ns(), _last_sequence + 1)
    _last_sequence = value
    return value


def json_serializer(value: Any) -> str:
    """Encode JSON column values; datetimes and UUIDs become ISO strings."""
    return to_json(value).decode()
