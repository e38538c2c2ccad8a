"""
Seed demo data into an empty store.

Does nothing if any job already exists. Counts come from the SEED_* settings.

Usage:
    python scripts/seed_demo_data.py
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path so we can import recruiter_ai when not installed
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruiter_ai.db.session import open_database
from recruiter_ai.main import configure_logging
from recruiter_ai.services.maintenance_service import MaintenanceService
from recruiter_ai.services.seed_service import SeedService


async def seed_demo_data() -> None:
    async with open_database() as database:
        async with database.session() as db:
            seeded = await SeedService(db).seed_database()

        async with database.session() as db:
            stats = await MaintenanceService(db).get_stats()

    if seeded:
        print("[OK] Seeded demo data")
    else:
        print("[OK] Store already has jobs, nothing seeded")
    print(f"     jobs={stats['jobs']} candidates={stats['candidates']} assessments={stats['assessments']}")


if __name__ == "__main__":
    configure_logging()
    print("Seeding demo data...\n")
    asyncio.run(seed_demo_data())
    print("\n[OK] Done!")
