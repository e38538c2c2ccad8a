"""
Job business logic service.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.factories import create_job
from recruiter_ai.models.job import Job
from recruiter_ai.repositories.job_repository import JobRepository
from recruiter_ai.schemas.base import changed_fields
from recruiter_ai.schemas.job import JobCreate, JobUpdate
from recruiter_ai.services.cascade_rules import apply_cascade
from recruiter_ai.utils.filters import active_filter, matches_search

logger = logging.getLogger(__name__)


class JobService:
    """Service for job business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = JobRepository(db)

    async def list_jobs(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Job]:
        """List jobs by board order, filtered by status and a search term.

        The search matches title, description and tags, case-insensitively.
        """
        try:
            jobs = await self.repository.list(status=active_filter(status))
            if search:
                jobs = [
                    job for job in jobs
                    if matches_search(search, [job.title, job.description, *job.tags])
                ]
            return jobs
        except Exception:
            logger.exception("Error fetching jobs")
            raise

    async def get_job(self, job_id: Any) -> Optional[Job]:
        """Get a job by ID."""
        try:
            return await self.repository.get_by_id(job_id)
        except Exception:
            logger.exception("Error fetching job %s", job_id)
            raise

    async def create_job(self, data: Union[JobCreate, Mapping[str, Any], None] = None) -> Job:
        """Create a job from a partial; a supplied id upserts."""
        try:
            record = data if isinstance(data, JobCreate) else create_job(data)
            job = await self.repository.create(record)
            logger.info(
                "Job %s created (%s id)", job.id, "preserved" if record.id_supplied else "generated"
            )
            return job
        except Exception:
            logger.exception("Error creating job")
            raise

    async def update_job(
        self, job_id: Any, data: Union[JobUpdate, Mapping[str, Any]]
    ) -> Optional[Job]:
        """Update a job. Returns None if it does not exist."""
        try:
            updates = data if isinstance(data, JobUpdate) else JobUpdate.model_validate(data)
            return await self.repository.update(job_id, changed_fields(updates))
        except Exception:
            logger.exception("Error updating job %s", job_id)
            raise

    async def delete_job(self, job_id: Any) -> None:
        """Delete a job together with its candidates and assessments."""
        try:
            async with self.db.begin_nested():
                await self.repository.delete_by_id(job_id)
                await apply_cascade(self.db, Job, job_id)
        except Exception:
            logger.exception("Error deleting job %s", job_id)
            raise

    async def reorder_jobs(self, from_order: int, to_order: int) -> List[Job]:
        """Swap the jobs holding two order values.

        All-or-nothing: when either order value is unused nothing changes.
        Always returns the full job list in board order.
        """
        try:
            async with self.db.begin_nested():
                from_job = await self.repository.find_by_order(from_order)
                to_job = await self.repository.find_by_order(to_order)

                if from_job and to_job:
                    from_job.order = to_order
                    to_job.order = from_order
                    await self.db.flush()

            return await self.repository.list()
        except Exception:
            logger.exception("Error reordering jobs")
            raise
