"""
Assessment model.

Represents a structured quiz/form linked to a job.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.models.base_model import TimestampedModel


class Assessment(TimestampedModel):
    """
    Assessment table.

    sections holds the ordered section/question tree as JSON.
    """

    __tablename__ = "assessments"

    job_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        index=True,
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    sections: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    # time_limit / allow_multiple_attempts / show_results
    settings: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    status: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
        index=True,
    )
