"""
Entity factories.

Each factory takes a partial mapping (and/or keyword overrides) and returns a
fully-populated record with every default filled in. Factories never touch
storage; every create path in the services goes through one of them.
"""

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from recruiter_ai.schemas.assessment import AssessmentCreate, Question, Section
from recruiter_ai.schemas.assessment_response import AssessmentResponseCreate
from recruiter_ai.schemas.candidate import CandidateCreate
from recruiter_ai.schemas.job import JobCreate
from recruiter_ai.schemas.note import NoteCreate
from recruiter_ai.schemas.timeline_event import TimelineEventCreate


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _build(schema: Type[SchemaT], overrides: Optional[Mapping[str, Any]], extra: Mapping[str, Any]) -> SchemaT:
    values = {**(overrides or {}), **extra}
    # An empty or missing id means "generate one", same as leaving it out
    if "id" in values and values["id"] in (None, ""):
        values.pop("id")
    return schema.model_validate(values)


def create_job(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> JobCreate:
    return _build(JobCreate, overrides, kwargs)


def create_candidate(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> CandidateCreate:
    return _build(CandidateCreate, overrides, kwargs)


def create_assessment(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> AssessmentCreate:
    return _build(AssessmentCreate, overrides, kwargs)


def create_section(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Section:
    return _build(Section, overrides, kwargs)


def create_question(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Question:
    return _build(Question, overrides, kwargs)


def create_timeline_event(
    overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> TimelineEventCreate:
    """Build a timeline event.

    Untagged metadata mappings are wrapped as custom metadata so free-form
    event types still validate.
    """
    values = {**(overrides or {}), **kwargs}
    metadata = values.get("metadata")
    if isinstance(metadata, Mapping) and "kind" not in metadata:
        values["metadata"] = {"kind": "custom", "data": dict(metadata)}
    return _build(TimelineEventCreate, values, {})


def create_note(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> NoteCreate:
    return _build(NoteCreate, overrides, kwargs)


def create_assessment_response(
    overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> AssessmentResponseCreate:
    return _build(AssessmentResponseCreate, overrides, kwargs)
