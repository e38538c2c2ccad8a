"""
Job repository - database operations for Job.
"""

from typing import List, Optional

from recruiter_ai.models.job import Job
from recruiter_ai.repositories.base_repository import RecordRepository


class JobRepository(RecordRepository[Job]):
    """Repository for Job database operations."""

    model = Job

    async def list(self, status: Optional[str] = None) -> List[Job]:
        """List jobs by ascending order, optionally for one status."""
        criteria = []
        if status is not None:
            criteria.append(Job.status == status)
        return await self.list_where(*criteria, order_by=(Job.order.asc(), Job.seq.asc()))

    async def find_by_order(self, order: int) -> Optional[Job]:
        """First job (in board order) currently holding an order value."""
        jobs = await self.list_where(Job.order == order, order_by=(Job.seq.asc(),))
        return jobs[0] if jobs else None
