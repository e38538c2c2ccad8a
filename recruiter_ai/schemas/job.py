"""
Job Pydantic schemas.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from recruiter_ai.schemas.base import RecordRead, StampedRecord


JobStatus = Literal["active", "archived"]


class JobCreate(StampedRecord):
    """Fully-defaulted job, ready to insert."""

    title: str = ""
    slug: str = ""
    status: JobStatus = "active"
    tags: List[str] = Field(default_factory=list)
    order: int = 0
    description: str = ""
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    location: str = ""
    salary: str = ""
    type: str = "full-time"
    department: str = ""


class JobUpdate(BaseModel):
    """Schema for updating a job."""

    title: Optional[str] = None
    slug: Optional[str] = None
    status: Optional[JobStatus] = None
    tags: Optional[List[str]] = None
    order: Optional[int] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    type: Optional[str] = None
    department: Optional[str] = None


class JobRead(JobCreate, RecordRead):
    """Schema for reading job data."""
