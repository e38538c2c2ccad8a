"""
Candidate Pydantic schemas.
"""

from typing import Any, ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from recruiter_ai.schemas.base import OptionalEntityId, RecordRead, StampedRecord


CANDIDATE_STAGES = ("applied", "screen", "tech", "offer", "hired", "rejected")

CandidateStage = Literal["applied", "screen", "tech", "offer", "hired", "rejected"]

STAGE_LABELS = {
    "applied": "Applied",
    "screen": "Phone Screen",
    "tech": "Technical Interview",
    "offer": "Offer Extended",
    "hired": "Hired",
    "rejected": "Rejected",
}


class CandidateCreate(StampedRecord):
    """Fully-defaulted candidate, ready to insert."""

    name: str = ""
    email: str = ""
    phone: str = ""
    stage: CandidateStage = "applied"
    job_id: OptionalEntityId = None
    resume: Optional[str] = None
    cover_letter: Optional[str] = None

    # Denormalised copies; the notes/timeline/response tables are authoritative
    notes: List[Dict[str, Any]] = Field(default_factory=list)
    timeline: List[Dict[str, Any]] = Field(default_factory=list)
    assessment_responses: Dict[str, Any] = Field(default_factory=dict)


class CandidateUpdate(BaseModel):
    """Schema for updating a candidate."""

    # Columns an explicit None clears; None elsewhere leaves the value alone
    nullable_fields: ClassVar[frozenset] = frozenset({"job_id", "resume", "cover_letter"})

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    stage: Optional[CandidateStage] = None
    job_id: OptionalEntityId = None
    resume: Optional[str] = None
    cover_letter: Optional[str] = None
    notes: Optional[List[Dict[str, Any]]] = None
    timeline: Optional[List[Dict[str, Any]]] = None
    assessment_responses: Optional[Dict[str, Any]] = None


class CandidateRead(CandidateCreate, RecordRead):
    """Schema for reading candidate data."""
