"""
Repository for Note database operations.
"""

from typing import List

from recruiter_ai.models.note import Note
from recruiter_ai.repositories.base_repository import RecordRepository


class NoteRepository(RecordRepository[Note]):
    """Repository for Note operations."""

    model = Note

    async def list_for_candidate(self, candidate_id: str) -> List[Note]:
        """Notes for a candidate, most recent first."""
        return await self.list_where(
            Note.candidate_id == candidate_id,
            order_by=(Note.created_at.desc(), Note.seq.desc()),
        )
