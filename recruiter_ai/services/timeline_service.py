"""
Timeline business logic service.

Timeline events are append-only: there is no update or delete here. They
disappear only when their candidate is deleted.
"""

import logging
from typing import Any, List, Mapping, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.factories import create_timeline_event
from recruiter_ai.models.timeline_event import TimelineEvent
from recruiter_ai.repositories.timeline_event_repository import TimelineEventRepository
from recruiter_ai.schemas.base import coerce_id
from recruiter_ai.schemas.timeline_event import TimelineEventCreate

logger = logging.getLogger(__name__)


class TimelineService:
    """Service for candidate timeline events."""

    def __init__(self, db: AsyncSession):
        self.repository = TimelineEventRepository(db)

    async def get_candidate_timeline(self, candidate_id: Any) -> List[TimelineEvent]:
        """Events for a candidate, most recent first."""
        try:
            return await self.repository.list_for_candidate(coerce_id(candidate_id))
        except Exception:
            logger.exception("Error fetching timeline for candidate %s", candidate_id)
            raise

    async def create_timeline_event(
        self, data: Union[TimelineEventCreate, Mapping[str, Any], None] = None
    ) -> TimelineEvent:
        try:
            record = data if isinstance(data, TimelineEventCreate) else create_timeline_event(data)
            return await self.repository.create(record)
        except Exception:
            logger.exception("Error creating timeline event")
            raise
