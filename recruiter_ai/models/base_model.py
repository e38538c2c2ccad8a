"""
Base model mixins shared by every entity table.
"""

from datetime import datetime

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.db.base import Base, UTCDateTime, next_sequence


class RecordModel(Base):
    """
    Abstract base for entity tables.

    id is a string token (generated UUID or caller-supplied value).
    seq records insertion order and breaks created_at ties.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )

    seq: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=next_sequence,
        index=True,
    )


class TimestampedModel(RecordModel):
    """
    Abstract base for tables stamped by the lifecycle hooks.
    """

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )
