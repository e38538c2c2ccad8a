"""
Assessment repository - database operations for Assessment.
"""

from typing import List, Optional

from recruiter_ai.models.assessment import Assessment
from recruiter_ai.repositories.base_repository import RecordRepository


class AssessmentRepository(RecordRepository[Assessment]):
    """Repository for Assessment database operations."""

    model = Assessment

    async def list(
        self,
        job_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Assessment]:
        """List assessments, most recent first, with filters."""
        criteria = []
        if job_id is not None:
            criteria.append(Assessment.job_id == job_id)
        if status is not None:
            criteria.append(Assessment.status == status)
        return await self.list_where(
            *criteria,
            order_by=(Assessment.created_at.desc(), Assessment.seq.desc()),
        )

    async def get_by_job_id(self, job_id: str) -> Optional[Assessment]:
        """First assessment attached to a job, in insertion order."""
        rows = await self.list_where(Assessment.job_id == job_id, order_by=(Assessment.seq.asc(),))
        return rows[0] if rows else None
