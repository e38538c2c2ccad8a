"""
Setting model.

Key/value bookkeeping for the store itself (schema_version, seeded_at) and
for callers that need to persist small preferences.
"""

from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.db.base import Base


class Setting(Base):
    """
    Settings table.
    """

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    key: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )

    value: Mapped[Any] = mapped_column(
        JSON,
        nullable=True,
    )
