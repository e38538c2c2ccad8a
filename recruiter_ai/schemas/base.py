"""
Base Pydantic schemas with common fields.

These are templates that other schemas inherit from.
"""

import uuid
from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from recruiter_ai.utils.time import utc_now


def new_id() -> str:
    """Generate a random identifier for a new row."""
    return str(uuid.uuid4())


def coerce_id(value: Any) -> Any:
    """Identifiers may arrive as numbers; the store keys everything by string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, uuid.UUID)):
        return str(value)
    return value


EntityId = Annotated[str, BeforeValidator(coerce_id)]


class RecordBase(BaseModel):
    """
    Base schema for a fully-defaulted record, as produced by the factories.

    If the caller supplies an id, the record is upserted instead of inserted.
    """

    id: EntityId = Field(default_factory=new_id)

    @property
    def id_supplied(self) -> bool:
        return "id" in self.model_fields_set

    def to_columns(self) -> dict[str, Any]:
        """Column values for the matching ORM model."""
        return self.model_dump()


class StampedRecord(RecordBase):
    """Record with created/updated timestamps."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class RecordRead(BaseModel):
    """
    Mixin for reading records back out of the ORM.

    This tells Pydantic to work with SQLAlchemy models.
    """

    model_config = ConfigDict(from_attributes=True)


OptionalEntityId = Optional[EntityId]


def changed_fields(update: BaseModel) -> dict[str, Any]:
    """Fields the caller set on an update, with nested values fully defaulted.

    An explicit None only clears the fields named in the schema's
    nullable_fields; on any other field it leaves the stored value alone.
    """
    nullable = getattr(update, "nullable_fields", frozenset())
    values = update.model_dump()
    return {
        field: values[field]
        for field in update.model_fields_set
        if values[field] is not None or field in nullable
    }
