"""
Shared repository operations for entity tables.
"""

from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from recruiter_ai.models.base_model import RecordModel
from recruiter_ai.schemas.base import RecordBase, coerce_id


ModelT = TypeVar("ModelT", bound=RecordModel)


class RecordRepository(Generic[ModelT]):
    """Repository for a single entity table."""

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, record_id: Any) -> Optional[ModelT]:
        """Get a row by ID, or None when it does not exist."""
        result = await self.db.execute(
            select(self.model).where(self.model.id == coerce_id(record_id))
        )
        return result.scalar_one_or_none()

    async def list_where(self, *criteria, order_by: Iterable[Any] = ()) -> List[ModelT]:
        query = select(self.model).where(*criteria).order_by(*order_by)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(self, record: RecordBase) -> ModelT:
        """Insert a record.

        Records with a caller-supplied id are merged (overwrite-if-exists);
        records with a generated id are strictly inserted.
        """
        obj = self.model(**record.to_columns())
        if record.id_supplied:
            obj = await self.db.merge(obj)
        else:
            self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def bulk_put(self, records: Iterable[RecordBase]) -> int:
        """Upsert many records at once. Returns how many were written."""
        count = 0
        for record in records:
            await self.db.merge(self.model(**record.to_columns()))
            count += 1
        await self.db.flush()
        return count

    async def update(self, record_id: Any, update_data: dict[str, Any]) -> Optional[ModelT]:
        """Apply field changes to a row. Returns None when it does not exist."""
        obj = await self.get_by_id(record_id)
        if not obj:
            return None

        for field, value in update_data.items():
            setattr(obj, field, value)
        if "updated_at" in self.model.__table__.columns:
            # Every update is a touch, even when no value changed
            flag_modified(obj, "updated_at")

        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, record_id: Any) -> None:
        await self.db.execute(
            delete(self.model).where(self.model.id == coerce_id(record_id))
        )

    async def delete_where(self, *criteria) -> None:
        await self.db.execute(delete(self.model).where(*criteria))

    async def clear(self) -> None:
        await self.db.execute(delete(self.model))

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()
