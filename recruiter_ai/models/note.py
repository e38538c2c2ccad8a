"""
Note model.
"""

from typing import List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.models.base_model import TimestampedModel


class Note(TimestampedModel):
    """
    Note table - free text written about a candidate.
    """

    __tablename__ = "notes"

    candidate_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    mentions: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    tags: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
