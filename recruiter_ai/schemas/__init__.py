"""
Schemas package.

Pydantic records used by the factories (XCreate), partial updates (XUpdate)
and read views over ORM rows (XRead).
"""

from recruiter_ai.schemas.job import JobCreate, JobRead, JobUpdate
from recruiter_ai.schemas.candidate import CandidateCreate, CandidateRead, CandidateUpdate
from recruiter_ai.schemas.assessment import (
    AssessmentCreate,
    AssessmentRead,
    AssessmentSettings,
    AssessmentUpdate,
    Question,
    QuestionValidation,
    Section,
)
from recruiter_ai.schemas.timeline_event import TimelineEventCreate, TimelineEventRead
from recruiter_ai.schemas.note import NoteCreate, NoteRead, NoteUpdate
from recruiter_ai.schemas.assessment_response import (
    AssessmentResponseCreate,
    AssessmentResponseRead,
)

__all__ = [
    "JobCreate",
    "JobRead",
    "JobUpdate",
    "CandidateCreate",
    "CandidateRead",
    "CandidateUpdate",
    "AssessmentCreate",
    "AssessmentRead",
    "AssessmentSettings",
    "AssessmentUpdate",
    "Question",
    "QuestionValidation",
    "Section",
    "TimelineEventCreate",
    "TimelineEventRead",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
    "AssessmentResponseCreate",
    "AssessmentResponseRead",
]
