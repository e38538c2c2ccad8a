"""
TimelineEvent Pydantic schemas.

Event metadata is a tagged union on "kind" so consumers can match on it.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from recruiter_ai.schemas.base import EntityId, OptionalEntityId, RecordBase, RecordRead
from recruiter_ai.schemas.candidate import CandidateStage
from recruiter_ai.utils.time import utc_now


class InitialStageMetadata(BaseModel):
    kind: Literal["initial_stage"] = "initial_stage"
    stage: CandidateStage


class StageChangeMetadata(BaseModel):
    kind: Literal["stage_change"] = "stage_change"
    from_stage: Optional[CandidateStage] = None
    to_stage: CandidateStage


class NoteAddedMetadata(BaseModel):
    kind: Literal["note_added"] = "note_added"
    note_id: EntityId


class AssessmentCompletedMetadata(BaseModel):
    kind: Literal["assessment_completed"] = "assessment_completed"
    assessment_id: OptionalEntityId = None
    response_id: EntityId


class CustomMetadata(BaseModel):
    kind: Literal["custom"] = "custom"
    data: Dict[str, Any] = Field(default_factory=dict)


TimelineMetadata = Annotated[
    Union[
        InitialStageMetadata,
        StageChangeMetadata,
        NoteAddedMetadata,
        AssessmentCompletedMetadata,
        CustomMetadata,
    ],
    Field(discriminator="kind"),
]


class TimelineEventCreate(RecordBase):
    """Fully-defaulted timeline event, ready to insert."""

    candidate_id: OptionalEntityId = None
    type: str = "stage_change"
    title: str = ""
    description: str = ""
    # ORM attribute is event_metadata; "metadata" is reserved there
    metadata: TimelineMetadata = Field(
        default_factory=CustomMetadata,
        validation_alias=AliasChoices("event_metadata", "metadata"),
    )
    created_at: datetime = Field(default_factory=utc_now)

    def to_columns(self) -> dict[str, Any]:
        values = self.model_dump()
        values["event_metadata"] = values.pop("metadata")
        return values


class TimelineEventRead(TimelineEventCreate, RecordRead):
    """Schema for reading timeline events."""
