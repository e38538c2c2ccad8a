"""Assessments and submitted responses."""

import asyncio
from datetime import datetime, timezone

import pytest

from recruiter_ai.db.session import open_database
from recruiter_ai.schemas.assessment import AssessmentRead
from recruiter_ai.schemas.assessment_response import AssessmentResponseRead, ChoiceAnswer, TextAnswer
from recruiter_ai.schemas.timeline_event import AssessmentCompletedMetadata, TimelineEventRead
from recruiter_ai.services.assessment_response_service import AssessmentResponseService
from recruiter_ai.services.assessment_service import AssessmentService
from recruiter_ai.services.timeline_service import TimelineService


pytestmark = pytest.mark.db


def test_sections_round_trip(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                created = await AssessmentService(db).create_assessment({
                    "job_id": "job-1",
                    "title": "Screening",
                    "sections": [{
                        "title": "Basics",
                        "questions": [
                            {"type": "single_choice", "title": "Years?", "options": ["0-2", "3+"], "required": True},
                            {"type": "numeric", "title": "Salary", "validation": {"min_value": 0}},
                        ],
                    }],
                    "settings": {"time_limit": 30},
                })

            async with database.session() as db:
                fetched = await AssessmentService(db).get_assessment(created.id)

            read = AssessmentRead.model_validate(fetched)
            assert read.model_dump() == AssessmentRead.model_validate(created).model_dump()
            assert read.sections[0].questions[0].options == ["0-2", "3+"]
            assert read.sections[0].questions[1].validation.min_value == 0
            assert read.settings.time_limit == 30
            assert read.settings.show_results is False

    asyncio.run(main())


def test_create_with_existing_id_upserts(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                first = await AssessmentService(db).create_assessment({"title": "Draft"})

            async with database.session() as db:
                await AssessmentService(db).create_assessment({"id": first.id, "title": "Published"})

            async with database.session() as db:
                assessments = await AssessmentService(db).list_assessments()

            assert [(a.id, a.title) for a in assessments] == [(first.id, "Published")]

    asyncio.run(main())


def test_list_filters_and_lookup_by_job(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                service = AssessmentService(db)
                await service.create_assessment({"job_id": 1, "title": "One", "status": "active"})
                await service.create_assessment({"job_id": "2", "title": "Two", "status": "draft"})
                await service.create_assessment({"job_id": "2", "title": "Two again", "status": "active"})

            async with database.session() as db:
                service = AssessmentService(db)
                assert [a.title for a in await service.list_assessments()] == ["Two again", "Two", "One"]
                assert [a.title for a in await service.list_assessments(job_id=2)] == ["Two again", "Two"]
                assert [a.title for a in await service.list_assessments(status="active")] == ["Two again", "One"]
                assert [a.title for a in await service.list_assessments(job_id="all", status="draft")] == ["Two"]

                assert (await service.get_assessment_by_job_id("1")).title == "One"
                assert await service.get_assessment_by_job_id("3") is None

    asyncio.run(main())


def test_update_assessment(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                assessment = await AssessmentService(db).create_assessment({"title": "Draft"})

            async with database.session() as db:
                updated = await AssessmentService(db).update_assessment(
                    assessment.id, {"title": "Final", "settings": {"allow_multiple_attempts": True}}
                )

            assert updated.title == "Final"
            assert updated.settings["allow_multiple_attempts"] is True
            assert updated.updated_at >= assessment.updated_at

    asyncio.run(main())


def test_response_records_completion_event(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                response = await AssessmentResponseService(db).create_response({
                    "candidate_id": "c1",
                    "assessment_id": "a1",
                    "responses": {
                        "q1": {"kind": "text", "value": "Python"},
                        "q2": {"kind": "choice", "selected": [1]},
                    },
                    "score": 80,
                    "time_spent": 120000,
                })

            async with database.session() as db:
                service = AssessmentResponseService(db)
                fetched = await service.get_response("c1", "a1")
                assert await service.get_response("c1", "other") is None
                timeline = await TimelineService(db).get_candidate_timeline("c1")

            read = AssessmentResponseRead.model_validate(fetched)
            assert read.id == response.id
            assert isinstance(read.responses["q1"], TextAnswer)
            assert isinstance(read.responses["q2"], ChoiceAnswer)
            assert read.score == 80
            assert read.time_spent == 120000

            assert len(timeline) == 1
            event = TimelineEventRead.model_validate(timeline[0])
            assert event.type == "assessment_completed"
            assert isinstance(event.metadata, AssessmentCompletedMetadata)
            assert event.metadata.response_id == response.id
            assert event.metadata.assessment_id == "a1"

    asyncio.run(main())


def test_get_response_returns_first_submission(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                service = AssessmentResponseService(db)
                first = await service.create_response({"candidate_id": "c1", "assessment_id": "a1", "score": 10})
                await service.create_response({"candidate_id": "c1", "assessment_id": "a1", "score": 90})

            async with database.session() as db:
                service = AssessmentResponseService(db)
                assert (await service.get_response("c1", "a1")).id == first.id
                assert [r.score for r in await service.list_for_candidate("c1")] == [90, 10]

    asyncio.run(main())


def test_delete_assessment_removes_responses(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                assessment = await AssessmentService(db).create_assessment({"title": "Gone"})
                other = await AssessmentService(db).create_assessment({"title": "Stays"})
                for target in (assessment, other):
                    await AssessmentResponseService(db).create_response({
                        "candidate_id": "c1",
                        "assessment_id": target.id,
                    })

            async with database.session() as db:
                await AssessmentService(db).delete_assessment(assessment.id)

            async with database.session() as db:
                assert await AssessmentService(db).get_assessment(assessment.id) is None
                assert await AssessmentResponseService(db).get_response("c1", assessment.id) is None
                assert await AssessmentResponseService(db).get_response("c1", other.id) is not None

    asyncio.run(main())


def test_response_round_trip_and_upsert(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                created = await AssessmentResponseService(db).create_response({
                    "id": "r1",
                    "candidate_id": "c1",
                    "assessment_id": "a1",
                    "responses": {"q1": {"kind": "file", "file_name": "portfolio.pdf"}},
                    "completed_at": datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc),
                })

            async with database.session() as db:
                fetched = await AssessmentResponseService(db).get_response("c1", "a1")

            assert AssessmentResponseRead.model_validate(fetched).model_dump() == (
                AssessmentResponseRead.model_validate(created).model_dump()
            )

            async with database.session() as db:
                await AssessmentResponseService(db).create_response({
                    "id": "r1",
                    "candidate_id": "c1",
                    "assessment_id": "a1",
                    "score": 75,
                })

            async with database.session() as db:
                responses = await AssessmentResponseService(db).list_for_candidate("c1")

            assert [(r.id, r.score) for r in responses] == [("r1", 75)]

    asyncio.run(main())


def test_update_with_none_clears_status_but_keeps_title(database_url):
    async def main():
        async with open_database(database_url) as database:
            async with database.session() as db:
                assessment = await AssessmentService(db).create_assessment({"title": "Screening", "status": "active"})

            async with database.session() as db:
                updated = await AssessmentService(db).update_assessment(
                    assessment.id, {"title": None, "sections": None, "status": None}
                )

            assert updated.title == "Screening"
            assert updated.sections == []
            assert updated.status is None

    asyncio.run(main())
