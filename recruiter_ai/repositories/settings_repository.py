"""Repository for key/value settings."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.models.setting import Setting


class SettingsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str) -> Optional[Setting]:
        result = await self.db.execute(select(Setting).where(Setting.key == key))
        return result.scalar_one_or_none()

    async def upsert(self, key: str, value: Any) -> Setting:
        existing = await self.get(key)
        if existing:
            existing.value = value
            await self.db.flush()
            await self.db.refresh(existing)
            return existing

        record = Setting(key=key, value=value)
        self.db.add(record)
        await self.db.flush()
        await self.db.refresh(record)
        return record
