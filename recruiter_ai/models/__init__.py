"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also wires the timestamp hooks onto the stamped tables.
"""

from recruiter_ai.db.hooks import register_timestamp_hooks
from recruiter_ai.models.job import Job
from recruiter_ai.models.candidate import Candidate
from recruiter_ai.models.assessment import Assessment
from recruiter_ai.models.timeline_event import TimelineEvent
from recruiter_ai.models.note import Note
from recruiter_ai.models.assessment_response import AssessmentResponse
from recruiter_ai.models.setting import Setting

# TimelineEvent and AssessmentResponse are stamped by their factories instead
register_timestamp_hooks([Job, Candidate, Assessment, Note])

# Export all models
__all__ = [
    "Job",
    "Candidate",
    "Assessment",
    "TimelineEvent",
    "Note",
    "AssessmentResponse",
    "Setting",
]
