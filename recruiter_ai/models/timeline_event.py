"""
TimelineEvent model.

Append-only audit entries on a candidate.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.db.base import UTCDateTime
from recruiter_ai.models.base_model import RecordModel


class TimelineEvent(RecordModel):
    """
    TimelineEvent table.

    created_at is set by the factory, not by the lifecycle hooks.
    """

    __tablename__ = "timeline_events"

    candidate_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    # stage_change, note_added, assessment_completed, ...
    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="stage_change",
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    # "metadata" is reserved on declarative classes
    event_metadata: Mapped[Dict[str, Any]] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )
