"""
Candidate repository - database operations for Candidate.
"""

from typing import List, Optional

from recruiter_ai.models.candidate import Candidate
from recruiter_ai.repositories.base_repository import RecordRepository


class CandidateRepository(RecordRepository[Candidate]):
    """Repository for Candidate database operations."""

    model = Candidate

    async def list(
        self,
        stage: Optional[str] = None,
        job_id: Optional[str] = None,
    ) -> List[Candidate]:
        """List candidates, most recent first, with filters."""
        criteria = []
        if stage is not None:
            criteria.append(Candidate.stage == stage)
        if job_id is not None:
            criteria.append(Candidate.job_id == job_id)
        return await self.list_where(
            *criteria,
            order_by=(Candidate.created_at.desc(), Candidate.seq.desc()),
        )
