"""
Cascade rules applied when a parent row is deleted.

There are no storage-level foreign keys; dependents are removed with explicit
deletes issued in the caller's transaction. Rules are not recursive: removing
a job drops its candidates and assessments but leaves their notes, timeline
events and responses in place.
"""

import logging
from typing import Any, Dict, List, Tuple, Type

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.models import Assessment, AssessmentResponse, Candidate, Job, Note, TimelineEvent
from recruiter_ai.models.base_model import RecordModel
from recruiter_ai.schemas.base import coerce_id

logger = logging.getLogger(__name__)


# parent model -> [(dependent model, column holding the parent id)]
CASCADE_RULES: Dict[Type[RecordModel], List[Tuple[Type[RecordModel], str]]] = {
    Job: [
        (Candidate, "job_id"),
        (Assessment, "job_id"),
    ],
    Candidate: [
        (TimelineEvent, "candidate_id"),
        (Note, "candidate_id"),
        (AssessmentResponse, "candidate_id"),
    ],
    Assessment: [
        (AssessmentResponse, "assessment_id"),
    ],
}


async def apply_cascade(db: AsyncSession, parent: Type[RecordModel], parent_id: Any) -> None:
    """Delete every dependent row of one parent, one table at a time."""
    parent_id = coerce_id(parent_id)
    for dependent, column in CASCADE_RULES.get(parent, []):
        result = await db.execute(
            delete(dependent).where(getattr(dependent, column) == parent_id)
        )
        logger.debug(
            "Cascade %s %s -> removed %s rows from %s",
            parent.__tablename__,
            parent_id,
            result.rowcount,
            dependent.__tablename__,
        )
