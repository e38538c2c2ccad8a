"""
Job model.

Represents an open position listing.
"""

from typing import List

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruiter_ai.models.base_model import TimestampedModel


class Job(TimestampedModel):
    """
    Job table - an open position.

    order is the manual rank used by the jobs board; values need not be unique.
    """

    __tablename__ = "jobs"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        index=True,
    )

    slug: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        index=True,
    )

    # active / archived
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        index=True,
    )

    tags: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        default=0,
        index=True,
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    requirements: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    benefits: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    location: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )

    salary: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )

    # full-time, part-time, contract, ...
    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="full-time",
    )

    department: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )
