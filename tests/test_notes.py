"""Candidate notes."""

import asyncio

import pytest

from recruiter_ai.db.session import open_database
from recruiter_ai.schemas.note import NoteRead
from recruiter_ai.schemas.timeline_event import NoteAddedMetadata, TimelineEventRead
from recruiter_ai.services.note_service import NoteService
from recruiter_ai.services.timeline_service import TimelineService


pytestmark = pytest.mark.db


def test_create_note_records_timeline_event(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                note = await NoteService(db).create_note({
                    "candidate_id": "c1",
                    "content": "Great culture fit, @alex please review",
                    "mentions": ["alex"],
                })

            async with database.session() as db:
                notes = await NoteService(db).get_candidate_notes("c1")
                timeline = await TimelineService(db).get_candidate_timeline("c1")

            assert [(n.id, n.mentions) for n in notes] == [(note.id, ["alex"])]
            event = TimelineEventRead.model_validate(timeline[0])
            assert event.type == "note_added"
            assert isinstance(event.metadata, NoteAddedMetadata)
            assert event.metadata.note_id == note.id

    asyncio.run(main())


def test_notes_are_listed_most_recent_first(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                service = NoteService(db)
                for content in ("first", "second", "third"):
                    await service.create_note({"candidate_id": "c1", "content": content})
                await service.create_note({"candidate_id": "c2", "content": "elsewhere"})

            async with database.session() as db:
                notes = await NoteService(db).get_candidate_notes("c1")

            assert [n.content for n in notes] == ["third", "second", "first"]

    asyncio.run(main())


def test_update_and_delete_note(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                note = await NoteService(db).create_note({"candidate_id": "c1", "content": "draft"})

            async with database.session() as db:
                updated = await NoteService(db).update_note(note.id, {"content": "final", "tags": ["strong"]})
            assert updated.content == "final"
            assert updated.tags == ["strong"]
            assert updated.mentions == []

            async with database.session() as db:
                await NoteService(db).delete_note(note.id)

            async with database.session() as db:
                assert await NoteService(db).get_note(note.id) is None
                # the timeline keeps its history
                assert len(await TimelineService(db).get_candidate_timeline("c1")) == 1

    asyncio.run(main())


def test_create_then_get_returns_same_record(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                created = await NoteService(db).create_note({
                    "candidate_id": "c1",
                    "content": "Ask about notice period",
                    "tags": ["follow-up"],
                })

            async with database.session() as db:
                fetched = await NoteService(db).get_note(created.id)

            assert NoteRead.model_validate(fetched).model_dump() == NoteRead.model_validate(created).model_dump()

    asyncio.run(main())


def test_supplied_id_upserts(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                service = NoteService(db)
                await service.create_note({"id": "n1", "candidate_id": "c1", "content": "draft"})
                await service.create_note({"id": "n1", "candidate_id": "c1", "content": "final"})

            async with database.session() as db:
                notes = await NoteService(db).get_candidate_notes("c1")

            assert [(n.id, n.content) for n in notes] == [("n1", "final")]

    asyncio.run(main())
