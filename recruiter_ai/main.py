"""
Entry point.

Opens the local store, seeds it on first start and reports row counts.

Usage:
    python -m recruiter_ai.main
"""

import asyncio
import logging
from typing import Dict, Optional

from recruiter_ai.core.config import settings
from recruiter_ai.db.session import Database
from recruiter_ai.services.maintenance_service import MaintenanceService
from recruiter_ai.services.seed_service import SeedService

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


async def start(database: Database, seed: Optional[bool] = None) -> Dict[str, int]:
    """Initialise the store, seed it if it is empty, and return its stats."""
    await database.init()

    if settings.SEED_ON_STARTUP if seed is None else seed:
        async with database.session() as db:
            seeder = SeedService(db)
            if await seeder.needs_seeding():
                await seeder.seed_database()

    async with database.session() as db:
        return await MaintenanceService(db).get_stats()


async def main() -> None:
    configure_logging()
    logger.info("Starting %s...", settings.APP_NAME)

    database = Database()
    try:
        stats = await start(database)
        logger.info(
            "Store ready: %s jobs, %s candidates, %s assessments",
            stats["jobs"],
            stats["candidates"],
            stats["assessments"],
        )
    finally:
        await database.dispose()
        logger.info("Shutting down %s...", settings.APP_NAME)


if __name__ == "__main__":
    asyncio.run(main())
