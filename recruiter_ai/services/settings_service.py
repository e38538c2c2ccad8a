"""
Key/value settings service.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from recruiter_ai.repositories.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, db: AsyncSession):
        self.repository = SettingsRepository(db)

    async def get_value(self, key: str, default: Any = None) -> Any:
        try:
            setting = await self.repository.get(key)
        except Exception:
            logger.exception("Error reading setting %s", key)
            raise
        return default if setting is None else setting.value

    async def set_value(self, key: str, value: Any) -> None:
        try:
            await self.repository.upsert(key, value)
        except Exception:
            logger.exception("Error writing setting %s", key)
            raise
