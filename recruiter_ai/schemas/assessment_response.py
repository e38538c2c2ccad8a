"""
AssessmentResponse Pydantic schemas.

Each answer is tagged by kind, matching the question type that produced it:
text for short/long text, numeric, choice (selected option indices) and
file (a file name placeholder for uploads).
"""

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from recruiter_ai.schemas.base import OptionalEntityId, RecordBase, RecordRead
from recruiter_ai.utils.time import utc_now


class TextAnswer(BaseModel):
    kind: Literal["text"] = "text"
    value: str


class NumericAnswer(BaseModel):
    kind: Literal["numeric"] = "numeric"
    value: float


class ChoiceAnswer(BaseModel):
    kind: Literal["choice"] = "choice"
    selected: List[int] = Field(default_factory=list)


class FileAnswer(BaseModel):
    kind: Literal["file"] = "file"
    file_name: str


Answer = Annotated[
    Union[TextAnswer, NumericAnswer, ChoiceAnswer, FileAnswer],
    Field(discriminator="kind"),
]


class AssessmentResponseCreate(RecordBase):
    """Fully-defaulted assessment response, ready to insert."""

    candidate_id: OptionalEntityId = None
    assessment_id: OptionalEntityId = None
    responses: Dict[str, Answer] = Field(default_factory=dict)
    score: Optional[float] = None
    completed_at: Optional[datetime] = None
    # milliseconds
    time_spent: Optional[int] = None
    created_at: datetime = Field(default_factory=utc_now)


class AssessmentResponseRead(AssessmentResponseCreate, RecordRead):
    """Schema for reading assessment responses."""
