"""
Candidate model.

Represents an applicant moving through the hiring pipeline.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.models.base_model import TimestampedModel


class Candidate(TimestampedModel):
    """
    Candidate table - an applicant tracked through hiring stages.

    notes, timeline and assessment_responses are denormalised copies kept for
    convenience. The authoritative rows live in their own tables keyed by
    candidate_id.
    """

    __tablename__ = "candidates"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        index=True,
    )

    phone: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="",
    )

    # applied / screen / tech / offer / hired / rejected
    stage: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="applied",
        index=True,
    )

    # Job this candidate applied to (no FK, cleaned up by cascade rules)
    job_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    resume: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    cover_letter: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    notes: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    timeline: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    assessment_responses: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
