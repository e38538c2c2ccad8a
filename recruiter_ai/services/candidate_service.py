"""
Candidate business logic service.

Creating a candidate and moving it between stages both leave a stage_change
entry on the candidate's timeline.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.factories import create_candidate
from recruiter_ai.models.candidate import Candidate
from recruiter_ai.repositories.candidate_repository import CandidateRepository
from recruiter_ai.schemas.base import changed_fields, coerce_id
from recruiter_ai.schemas.candidate import STAGE_LABELS, CandidateCreate, CandidateUpdate
from recruiter_ai.services.cascade_rules import apply_cascade
from recruiter_ai.services.timeline_service import TimelineService
from recruiter_ai.utils.filters import active_filter, matches_search

logger = logging.getLogger(__name__)


class CandidateService:
    """Service for candidate business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = CandidateRepository(db)
        self.timeline = TimelineService(db)

    async def list_candidates(
        self,
        stage: Optional[str] = None,
        job_id: Any = None,
        search: Optional[str] = None,
    ) -> List[Candidate]:
        """List candidates, most recent first.

        The search matches name and email, case-insensitively.
        """
        try:
            job_id = active_filter(job_id)
            candidates = await self.repository.list(
                stage=active_filter(stage),
                job_id=coerce_id(job_id) if job_id is not None else None,
            )
            if search:
                candidates = [
                    candidate for candidate in candidates
                    if matches_search(search, [candidate.name, candidate.email])
                ]
            return candidates
        except Exception:
            logger.exception("Error fetching candidates")
            raise

    async def get_candidate(self, candidate_id: Any) -> Optional[Candidate]:
        """Get a candidate by ID."""
        try:
            return await self.repository.get_by_id(candidate_id)
        except Exception:
            logger.exception("Error fetching candidate %s", candidate_id)
            raise

    async def create_candidate(
        self, data: Union[CandidateCreate, Mapping[str, Any], None] = None
    ) -> Candidate:
        """Create a candidate and record the application on its timeline."""
        try:
            record = data if isinstance(data, CandidateCreate) else create_candidate(data)
            candidate = await self.repository.create(record)
            logger.info(
                "Candidate %s created (%s id)",
                candidate.id,
                "preserved" if record.id_supplied else "generated",
            )

            await self.timeline.create_timeline_event({
                "candidate_id": candidate.id,
                "type": "stage_change",
                "title": "Application Submitted",
                "description": "Candidate applied for the position",
                "metadata": {"kind": "initial_stage", "stage": candidate.stage},
            })
            return candidate
        except Exception:
            logger.exception("Error creating candidate")
            raise

    async def update_candidate(
        self, candidate_id: Any, data: Union[CandidateUpdate, Mapping[str, Any]]
    ) -> Optional[Candidate]:
        """Update a candidate. Returns None if it does not exist.

        A change of stage appends one stage_change event comparing against the
        row as it was read just before the update.
        """
        try:
            updates = data if isinstance(data, CandidateUpdate) else CandidateUpdate.model_validate(data)
            update_data = changed_fields(updates)

            existing = await self.repository.get_by_id(candidate_id)
            if existing is None:
                return None
            from_stage = existing.stage

            candidate = await self.repository.update(candidate_id, update_data)

            to_stage = update_data.get("stage")
            if to_stage and to_stage != from_stage:
                await self.timeline.create_timeline_event({
                    "candidate_id": candidate.id,
                    "type": "stage_change",
                    "title": f"Stage Changed to {STAGE_LABELS[to_stage]}",
                    "description": f"Candidate moved from {from_stage} to {to_stage}",
                    "metadata": {"kind": "stage_change", "from_stage": from_stage, "to_stage": to_stage},
                })
            return candidate
        except Exception:
            logger.exception("Error updating candidate %s", candidate_id)
            raise

    async def delete_candidate(self, candidate_id: Any) -> None:
        """Delete a candidate with its timeline, notes and assessment responses."""
        try:
            async with self.db.begin_nested():
                await self.repository.delete_by_id(candidate_id)
                await apply_cascade(self.db, Candidate, candidate_id)
        except Exception:
            logger.exception("Error deleting candidate %s", candidate_id)
            raise
