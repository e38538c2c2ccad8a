"""
Repository for AssessmentResponse database operations.
"""

from typing import List, Optional

from recruiter_ai.models.assessment_response import AssessmentResponse
from recruiter_ai.repositories.base_repository import RecordRepository


class AssessmentResponseRepository(RecordRepository[AssessmentResponse]):
    """Repository for AssessmentResponse operations."""

    model = AssessmentResponse

    async def get_for_candidate_and_assessment(
        self, candidate_id: str, assessment_id: str
    ) -> Optional[AssessmentResponse]:
        """First response a candidate submitted for an assessment."""
        rows = await self.list_where(
            AssessmentResponse.candidate_id == candidate_id,
            AssessmentResponse.assessment_id == assessment_id,
            order_by=(AssessmentResponse.seq.asc(),),
        )
        return rows[0] if rows else None

    async def list_for_candidate(self, candidate_id: str) -> List[AssessmentResponse]:
        return await self.list_where(
            AssessmentResponse.candidate_id == candidate_id,
            order_by=(AssessmentResponse.created_at.desc(), AssessmentResponse.seq.desc()),
        )
