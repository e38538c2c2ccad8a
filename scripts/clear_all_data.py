"""
Remove every job, candidate, assessment, note, timeline event and response.

Settings (schema version, seeded_at) are kept. The next start reseeds.

Usage:
    python scripts/clear_all_data.py --yes
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruiter_ai.db.session import open_database
from recruiter_ai.main import configure_logging
from recruiter_ai.services.maintenance_service import MaintenanceService


async def clear_all_data() -> None:
    async with open_database() as database:
        async with database.session() as db:
            await MaintenanceService(db).clear_all_data()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--yes", action="store_true", help="Confirm deleting all data")
    args = parser.parse_args()

    if not args.yes:
        print("Refusing to clear data without --yes")
        return 1

    configure_logging()
    asyncio.run(clear_all_data())
    print("[OK] All data cleared")
    return 0


if __name__ == "__main__":
    sys.exit(main())
