"""
Repository for TimelineEvent database operations.
"""

from typing import List

from recruiter_ai.models.timeline_event import TimelineEvent
from recruiter_ai.repositories.base_repository import RecordRepository


class TimelineEventRepository(RecordRepository[TimelineEvent]):
    """Repository for TimelineEvent operations."""

    model = TimelineEvent

    async def list_for_candidate(self, candidate_id: str) -> List[TimelineEvent]:
        """Events for a candidate, most recent first."""
        return await self.list_where(
            TimelineEvent.candidate_id == candidate_id,
            order_by=(TimelineEvent.created_at.desc(), TimelineEvent.seq.desc()),
        )
