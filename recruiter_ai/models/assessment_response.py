"""
AssessmentResponse model.

A candidate's submitted answers to one assessment.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.db.base import UTCDateTime
from recruiter_ai.models.base_model import RecordModel


class AssessmentResponse(RecordModel):
    """
    AssessmentResponse table.

    One row per (candidate_id, assessment_id) is intended but not enforced;
    lookups return the first match.
    """

    __tablename__ = "assessment_responses"

    candidate_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    assessment_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    # question key -> tagged answer
    responses: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    score: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
    )

    completed_at: Mapped[Optional[datetime]] = mapped_column(
        UTCDateTime,
        nullable=True,
    )

    # milliseconds
    time_spent: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )
