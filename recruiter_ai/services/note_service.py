"""
Note business logic service.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.factories import create_note
from recruiter_ai.models.note import Note
from recruiter_ai.repositories.note_repository import NoteRepository
from recruiter_ai.schemas.base import changed_fields, coerce_id
from recruiter_ai.schemas.note import NoteCreate, NoteUpdate
from recruiter_ai.services.timeline_service import TimelineService

logger = logging.getLogger(__name__)


class NoteService:
    """Service for candidate notes."""

    def __init__(self, db: AsyncSession):
        self.repository = NoteRepository(db)
        self.timeline = TimelineService(db)

    async def get_candidate_notes(self, candidate_id: Any) -> List[Note]:
        """Notes for a candidate, most recent first."""
        try:
            return await self.repository.list_for_candidate(coerce_id(candidate_id))
        except Exception:
            logger.exception("Error fetching notes for candidate %s", candidate_id)
            raise

    async def get_note(self, note_id: Any) -> Optional[Note]:
        try:
            return await self.repository.get_by_id(note_id)
        except Exception:
            logger.exception("Error fetching note %s", note_id)
            raise

    async def create_note(self, data: Union[NoteCreate, Mapping[str, Any], None] = None) -> Note:
        """Create a note and record it on the candidate's timeline."""
        try:
            record = data if isinstance(data, NoteCreate) else create_note(data)
            note = await self.repository.create(record)

            await self.timeline.create_timeline_event({
                "candidate_id": note.candidate_id,
                "type": "note_added",
                "title": "Note Added",
                "description": "A new note was added to the candidate",
                "metadata": {"kind": "note_added", "note_id": note.id},
            })
            return note
        except Exception:
            logger.exception("Error creating note")
            raise

    async def update_note(self, note_id: Any, data: Union[NoteUpdate, Mapping[str, Any]]) -> Optional[Note]:
        try:
            updates = data if isinstance(data, NoteUpdate) else NoteUpdate.model_validate(data)
            return await self.repository.update(note_id, changed_fields(updates))
        except Exception:
            logger.exception("Error updating note %s", note_id)
            raise

    async def delete_note(self, note_id: Any) -> None:
        try:
            await self.repository.delete_by_id(note_id)
        except Exception:
            logger.exception("Error deleting note %s", note_id)
            raise
