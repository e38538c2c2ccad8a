"""
Assessment business logic service.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.factories import create_assessment
from recruiter_ai.models.assessment import Assessment
from recruiter_ai.repositories.assessment_repository import AssessmentRepository
from recruiter_ai.schemas.assessment import AssessmentCreate, AssessmentUpdate
from recruiter_ai.schemas.base import changed_fields, coerce_id
from recruiter_ai.services.cascade_rules import apply_cascade
from recruiter_ai.utils.filters import active_filter

logger = logging.getLogger(__name__)


class AssessmentService:
    """Service for assessment business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = AssessmentRepository(db)

    async def list_assessments(
        self,
        job_id: Any = None,
        status: Optional[str] = None,
    ) -> List[Assessment]:
        """List assessments, most recent first, filtered by job and status."""
        try:
            job_id = active_filter(job_id)
            return await self.repository.list(
                job_id=coerce_id(job_id) if job_id is not None else None,
                status=active_filter(status),
            )
        except Exception:
            logger.exception("Error fetching assessments")
            raise

    async def get_assessment(self, assessment_id: Any) -> Optional[Assessment]:
        """Get an assessment by ID."""
        try:
            return await self.repository.get_by_id(assessment_id)
        except Exception:
            logger.exception("Error fetching assessment %s", assessment_id)
            raise

    async def get_assessment_by_job_id(self, job_id: Any) -> Optional[Assessment]:
        """First assessment attached to a job."""
        try:
            return await self.repository.get_by_job_id(coerce_id(job_id))
        except Exception:
            logger.exception("Error fetching assessment for job %s", job_id)
            raise

    async def create_assessment(
        self, data: Union[AssessmentCreate, Mapping[str, Any], None] = None
    ) -> Assessment:
        """Create an assessment from a partial; a supplied id upserts."""
        try:
            record = data if isinstance(data, AssessmentCreate) else create_assessment(data)
            assessment = await self.repository.create(record)
            logger.info(
                "Assessment %s created (%s id)",
                assessment.id,
                "preserved" if record.id_supplied else "generated",
            )
            return assessment
        except Exception:
            logger.exception("Error creating assessment")
            raise

    async def update_assessment(
        self, assessment_id: Any, data: Union[AssessmentUpdate, Mapping[str, Any]]
    ) -> Optional[Assessment]:
        """Update an assessment. Returns None if it does not exist."""
        try:
            updates = data if isinstance(data, AssessmentUpdate) else AssessmentUpdate.model_validate(data)
            return await self.repository.update(assessment_id, changed_fields(updates))
        except Exception:
            logger.exception("Error updating assessment %s", assessment_id)
            raise

    async def delete_assessment(self, assessment_id: Any) -> None:
        """Delete an assessment and every response submitted to it."""
        try:
            async with self.db.begin_nested():
                await self.repository.delete_by_id(assessment_id)
                await apply_cascade(self.db, Assessment, assessment_id)
        except Exception:
            logger.exception("Error deleting assessment %s", assessment_id)
            raise
