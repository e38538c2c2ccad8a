"""
Maintenance operations: counts for the dashboard and the manual clear-all.
"""

import logging
from typing import Dict

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.repositories.assessment_repository import AssessmentRepository
from recruiter_ai.repositories.assessment_response_repository import AssessmentResponseRepository
from recruiter_ai.repositories.candidate_repository import CandidateRepository
from recruiter_ai.repositories.job_repository import JobRepository
from recruiter_ai.repositories.note_repository import NoteRepository
from recruiter_ai.repositories.timeline_event_repository import TimelineEventRepository

logger = logging.getLogger(__name__)


class MaintenanceService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.jobs = JobRepository(db)
        self.candidates = CandidateRepository(db)
        self.assessments = AssessmentRepository(db)
        self.timeline_events = TimelineEventRepository(db)
        self.notes = NoteRepository(db)
        self.assessment_responses = AssessmentResponseRepository(db)

    async def get_stats(self) -> Dict[str, int]:
        """Row counts for jobs, candidates and assessments."""
        try:
            return {
                "jobs": await self.jobs.count(),
                "candidates": await self.candidates.count(),
                "assessments": await self.assessments.count(),
            }
        except Exception:
            logger.exception("Error fetching stats")
            raise

    async def clear_all_data(self) -> None:
        """Empty every entity table in one transaction. Settings are kept."""
        try:
            async with self.db.begin_nested():
                for repository in (
                    self.jobs,
                    self.candidates,
                    self.assessments,
                    self.timeline_events,
                    self.notes,
                    self.assessment_responses,
                ):
                    await repository.clear()
            logger.warning("All recruitment data cleared")
        except Exception:
            logger.exception("Error clearing data")
            raise
