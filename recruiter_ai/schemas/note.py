"""
Note Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from recruiter_ai.schemas.base import OptionalEntityId, RecordRead, StampedRecord


class NoteCreate(StampedRecord):
    """Fully-defaulted note, ready to insert."""

    candidate_id: OptionalEntityId = None
    content: str = ""
    mentions: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class NoteUpdate(BaseModel):
    """Schema for updating a note."""

    content: Optional[str] = None
    mentions: Optional[List[str]] = None
    tags: Optional[List[str]] = None


class NoteRead(NoteCreate, RecordRead):
    """Schema for reading notes."""
