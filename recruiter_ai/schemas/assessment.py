"""
Assessment Pydantic schemas.

An assessment is an ordered list of sections, each an ordered list of
questions.
"""

from typing import Any, ClassVar, List, Literal, Optional

from pydantic import BaseModel, Field

from recruiter_ai.schemas.base import OptionalEntityId, RecordRead, StampedRecord, new_id


QuestionType = Literal[
    "single_choice",
    "multi_choice",
    "short_text",
    "long_text",
    "numeric",
    "file_upload",
]


class QuestionValidation(BaseModel):
    """Field-level validation rules; None means unconstrained."""

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    pattern: Optional[str] = None


class Question(BaseModel):
    id: str = Field(default_factory=new_id)
    type: QuestionType = "short_text"
    title: str = ""
    description: str = ""
    required: bool = False
    # Used by the choice types
    options: List[str] = Field(default_factory=list)
    validation: QuestionValidation = Field(default_factory=QuestionValidation)
    conditional_logic: Optional[Any] = None
    order: int = 0


class Section(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str = ""
    description: str = ""
    questions: List[Question] = Field(default_factory=list)
    order: int = 0


class AssessmentSettings(BaseModel):
    # minutes
    time_limit: Optional[int] = None
    allow_multiple_attempts: bool = False
    show_results: bool = False


class AssessmentCreate(StampedRecord):
    """Fully-defaulted assessment, ready to insert."""

    job_id: OptionalEntityId = None
    title: str = ""
    description: str = ""
    sections: List[Section] = Field(default_factory=list)
    settings: AssessmentSettings = Field(default_factory=AssessmentSettings)
    status: Optional[str] = None


class AssessmentUpdate(BaseModel):
    """Schema for updating an assessment."""

    nullable_fields: ClassVar[frozenset] = frozenset({"job_id", "status"})

    job_id: OptionalEntityId = None
    title: Optional[str] = None
    description: Optional[str] = None
    sections: Optional[List[Section]] = None
    settings: Optional[AssessmentSettings] = None
    status: Optional[str] = None


class AssessmentRead(AssessmentCreate, RecordRead):
    """Schema for reading assessment data."""
