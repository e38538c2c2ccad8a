"""
Assessment response business logic service.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.factories import create_assessment_response
from recruiter_ai.models.assessment_response import AssessmentResponse
from recruiter_ai.repositories.assessment_response_repository import AssessmentResponseRepository
from recruiter_ai.schemas.assessment_response import AssessmentResponseCreate
from recruiter_ai.schemas.base import coerce_id
from recruiter_ai.services.timeline_service import TimelineService

logger = logging.getLogger(__name__)


class AssessmentResponseService:
    """Service for submitted assessment responses."""

    def __init__(self, db: AsyncSession):
        self.repository = AssessmentResponseRepository(db)
        self.timeline = TimelineService(db)

    async def get_response(self, candidate_id: Any, assessment_id: Any) -> Optional[AssessmentResponse]:
        """The candidate's response to an assessment (first match)."""
        try:
            return await self.repository.get_for_candidate_and_assessment(
                coerce_id(candidate_id), coerce_id(assessment_id)
            )
        except Exception:
            logger.exception(
                "Error fetching response of candidate %s to assessment %s", candidate_id, assessment_id
            )
            raise

    async def list_for_candidate(self, candidate_id: Any) -> List[AssessmentResponse]:
        try:
            return await self.repository.list_for_candidate(coerce_id(candidate_id))
        except Exception:
            logger.exception("Error fetching responses for candidate %s", candidate_id)
            raise

    async def create_response(
        self, data: Union[AssessmentResponseCreate, Mapping[str, Any], None] = None
    ) -> AssessmentResponse:
        """Store a submission and record it on the candidate's timeline."""
        try:
            record = (
                data if isinstance(data, AssessmentResponseCreate) else create_assessment_response(data)
            )
            response = await self.repository.create(record)

            await self.timeline.create_timeline_event({
                "candidate_id": response.candidate_id,
                "type": "assessment_completed",
                "title": "Assessment Completed",
                "description": "Candidate completed the assessment",
                "metadata": {
                    "kind": "assessment_completed",
                    "assessment_id": response.assessment_id,
                    "response_id": response.id,
                },
            })
            return response
        except Exception:
            logger.exception("Error creating assessment response")
            raise
