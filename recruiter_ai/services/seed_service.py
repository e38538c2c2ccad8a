"""
Seeding controller.

Populates the store once, the first time it is opened with no jobs. Running
it again is a no-op; only an explicit clear-all returns the store to empty.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.repositories.assessment_repository import AssessmentRepository
from recruiter_ai.repositories.candidate_repository import CandidateRepository
from recruiter_ai.repositories.job_repository import JobRepository
from recruiter_ai.repositories.settings_repository import SettingsRepository
from recruiter_ai.services.seed_data import SeedData, generate_seed_data
from recruiter_ai.utils.time import utc_now_iso

logger = logging.getLogger(__name__)

SEEDED_AT_KEY = "seeded_at"


class SeedService:
    def __init__(self, db: AsyncSession):
        self.jobs = JobRepository(db)
        self.candidates = CandidateRepository(db)
        self.assessments = AssessmentRepository(db)
        self.settings = SettingsRepository(db)

    async def needs_seeding(self) -> bool:
        """True while the jobs table is empty.

        A failing count also reports True so startup still tries to seed.
        """
        try:
            return await self.jobs.count() == 0
        except Exception:
            logger.exception("Error checking if database needs seeding")
            return True

    async def seed_database(self, data: Optional[SeedData] = None) -> bool:
        """Seed an empty store. Returns False (and does nothing) if any job exists."""
        try:
            if await self.jobs.count() > 0:
                logger.info("Database already seeded, skipping...")
                return False

            logger.info("Seeding database with initial data...")
            data = data or generate_seed_data()

            job_count = await self.jobs.bulk_put(data.jobs)
            logger.info("Seeded %s jobs", job_count)

            candidate_count = await self.candidates.bulk_put(data.candidates)
            logger.info("Seeded %s candidates", candidate_count)

            assessment_count = await self.assessments.bulk_put(data.assessments)
            logger.info("Seeded %s assessments", assessment_count)

            await self.settings.upsert(SEEDED_AT_KEY, utc_now_iso())
            logger.info("Database seeding complete!")
            return True
        except Exception:
            logger.exception("Error seeding database")
            raise
