"""Candidate persistence, stage-change timeline events and cascades."""

import asyncio
from datetime import datetime, timezone

import pytest
from pydantic import TypeAdapter

from recruiter_ai.db.session import open_database
from recruiter_ai.schemas.candidate import CandidateRead
from recruiter_ai.schemas.timeline_event import InitialStageMetadata, StageChangeMetadata, TimelineEventRead
from recruiter_ai.services.assessment_response_service import AssessmentResponseService
from recruiter_ai.services.candidate_service import CandidateService
from recruiter_ai.services.job_service import JobService
from recruiter_ai.services.note_service import NoteService
from recruiter_ai.services.timeline_service import TimelineService


pytestmark = pytest.mark.db


def test_create_records_application_event(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                candidate = await CandidateService(db).create_candidate({"name": "Priya", "stage": "screen"})

            async with database.session() as db:
                timeline = await TimelineService(db).get_candidate_timeline(candidate.id)

            assert len(timeline) == 1
            event = TimelineEventRead.model_validate(timeline[0])
            assert event.type == "stage_change"
            assert event.title == "Application Submitted"
            assert isinstance(event.metadata, InitialStageMetadata)
            assert event.metadata.stage == "screen"

    asyncio.run(main())


def test_stage_change_appends_event(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                candidate = await CandidateService(db).create_candidate({"name": "Sam", "stage": "applied"})

            async with database.session() as db:
                updated = await CandidateService(db).update_candidate(candidate.id, {"stage": "tech"})
            assert updated.stage == "tech"

            async with database.session() as db:
                timeline = await TimelineService(db).get_candidate_timeline(candidate.id)

            assert len(timeline) == 2
            latest = TimelineEventRead.model_validate(timeline[0])
            assert latest.title == "Stage Changed to Technical Interview"
            assert isinstance(latest.metadata, StageChangeMetadata)
            assert latest.metadata.from_stage == "applied"
            assert latest.metadata.to_stage == "tech"
            assert timeline[0].event_metadata == {
                "kind": "stage_change",
                "from_stage": "applied",
                "to_stage": "tech",
            }

    asyncio.run(main())


def test_update_without_stage_change_adds_no_event(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                service = CandidateService(db)
                candidate = await service.create_candidate({"name": "Sam", "stage": "applied"})
                await service.update_candidate(candidate.id, {"email": "sam@example.com"})
                await service.update_candidate(candidate.id, {"stage": "applied"})

            async with database.session() as db:
                fetched = await CandidateService(db).get_candidate(candidate.id)
                timeline = await TimelineService(db).get_candidate_timeline(candidate.id)

            assert fetched.email == "sam@example.com"
            assert len(timeline) == 1

    asyncio.run(main())


def test_update_missing_candidate_returns_none(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                assert await CandidateService(db).update_candidate("ghost", {"stage": "hired"}) is None
                assert await TimelineService(db).get_candidate_timeline("ghost") == []

    asyncio.run(main())


def test_list_is_most_recent_first_with_filters(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                job = await JobService(db).create_job({"id": 7, "title": "Engineer"})
                service = CandidateService(db)
                await service.create_candidate({"name": "Alice", "email": "alice@example.com", "job_id": 7})
                await service.create_candidate({"name": "Bob", "email": "bob@example.com", "stage": "offer"})
                await service.create_candidate({"name": "Carol", "email": "carol@example.com", "job_id": job.id})

            async with database.session() as db:
                service = CandidateService(db)

                assert [c.name for c in await service.list_candidates()] == ["Carol", "Bob", "Alice"]
                assert [c.name for c in await service.list_candidates(stage="all")] == ["Carol", "Bob", "Alice"]
                assert [c.name for c in await service.list_candidates(stage="offer")] == ["Bob"]
                assert [c.name for c in await service.list_candidates(job_id=7)] == ["Carol", "Alice"]
                assert [c.name for c in await service.list_candidates(job_id="7")] == ["Carol", "Alice"]
                assert [c.name for c in await service.list_candidates(search="ALICE@")] == ["Alice"]
                assert [c.name for c in await service.list_candidates(search="car")] == ["Carol"]
                assert await service.list_candidates(stage="offer", job_id=7) == []

    asyncio.run(main())


def test_delete_candidate_removes_dependents(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                doomed = await CandidateService(db).create_candidate({"name": "Doomed"})
                kept = await CandidateService(db).create_candidate({"name": "Kept"})
                for candidate in (doomed, kept):
                    await NoteService(db).create_note({"candidate_id": candidate.id, "content": "note"})
                    await AssessmentResponseService(db).create_response({
                        "candidate_id": candidate.id,
                        "assessment_id": "a1",
                    })

            async with database.session() as db:
                await CandidateService(db).delete_candidate(doomed.id)

            async with database.session() as db:
                assert await CandidateService(db).get_candidate(doomed.id) is None
                assert await TimelineService(db).get_candidate_timeline(doomed.id) == []
                assert await NoteService(db).get_candidate_notes(doomed.id) == []
                assert await AssessmentResponseService(db).list_for_candidate(doomed.id) == []

                # stage change + note + assessment completed
                assert len(await TimelineService(db).get_candidate_timeline(kept.id)) == 3
                assert len(await NoteService(db).get_candidate_notes(kept.id)) == 1
                assert len(await AssessmentResponseService(db).list_for_candidate(kept.id)) == 1

    asyncio.run(main())


def test_failed_cascade_keeps_the_candidate(database_url, monkeypatch):
    async def failing_cascade(db, parent, parent_id):
        raise RuntimeError("cascade failed")

    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                candidate = await CandidateService(db).create_candidate({"name": "Sticky"})

            monkeypatch.setattr("recruiter_ai.services.candidate_service.apply_cascade", failing_cascade)

            async with database.session() as db:
                with pytest.raises(RuntimeError):
                    await CandidateService(db).delete_candidate(candidate.id)

            async with database.session() as db:
                assert await CandidateService(db).get_candidate(candidate.id) is not None
                assert len(await TimelineService(db).get_candidate_timeline(candidate.id)) == 1

    asyncio.run(main())


def test_create_then_get_returns_same_record(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                created = await CandidateService(db).create_candidate({
                    "name": "Priya Sharma",
                    "email": "priya@example.com",
                    "stage": "screen",
                    "resume": "resume.pdf",
                })

            async with database.session() as db:
                fetched = await CandidateService(db).get_candidate(created.id)

            assert CandidateRead.model_validate(fetched).model_dump() == (
                CandidateRead.model_validate(created).model_dump()
            )

    asyncio.run(main())


def test_supplied_id_upserts_and_records_each_application(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                service = CandidateService(db)
                await service.create_candidate({"id": "c1", "name": "First"})
                await service.create_candidate({"id": "c1", "name": "Second", "stage": "screen"})

            async with database.session() as db:
                candidates = await CandidateService(db).list_candidates()
                timeline = await TimelineService(db).get_candidate_timeline("c1")

            assert [(c.id, c.name, c.stage) for c in candidates] == [("c1", "Second", "screen")]
            assert [event.title for event in timeline] == ["Application Submitted", "Application Submitted"]

    asyncio.run(main())


def test_none_clears_optional_fields_only(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                candidate = await CandidateService(db).create_candidate({
                    "name": "Sam",
                    "job_id": "job-1",
                    "resume": "cv.pdf",
                })

            async with database.session() as db:
                updated = await CandidateService(db).update_candidate(
                    candidate.id, {"job_id": None, "resume": None, "name": None, "stage": None}
                )

            assert updated.job_id is None
            assert updated.resume is None
            assert updated.name == "Sam"
            assert updated.stage == "applied"

            async with database.session() as db:
                assert len(await TimelineService(db).get_candidate_timeline(candidate.id)) == 1

    asyncio.run(main())


def test_datetimes_in_open_fields_are_stored_as_iso_strings(database_url):
    submitted_at = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)

    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                candidate = await CandidateService(db).create_candidate({
                    "name": "Sam",
                    "assessment_responses": {"a1": {"submitted_at": submitted_at}},
                })

            async with database.session() as db:
                await CandidateService(db).update_candidate(
                    candidate.id, {"notes": [{"content": "call back", "at": submitted_at}]}
                )

            async with database.session() as db:
                fetched = await CandidateService(db).get_candidate(candidate.id)

            as_datetime = TypeAdapter(datetime).validate_python
            assert as_datetime(fetched.assessment_responses["a1"]["submitted_at"]) == submitted_at
            assert as_datetime(fetched.notes[0]["at"]) == submitted_at

    asyncio.run(main())
