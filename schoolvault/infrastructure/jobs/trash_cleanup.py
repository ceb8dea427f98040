"""Trash cleanup job.

Runs CleanupOldTrash once and prints the purge counts. Scheduling stays
external; the job is idempotent and safe to run repeatedly.

Usage:
    python -m schoolvault.infrastructure.jobs.trash_cleanup
    python -m schoolvault.infrastructure.jobs.trash_cleanup --days 30

Exit codes:
    0: Cleanup finished
    1: Database unreachable
    2: Invalid arguments
"""

import argparse
import asyncio
import sys

from schoolvault.application.commands.handlers.cleanup_old_trash_handler import (
    CleanupReport,
)
from schoolvault.application.commands.trash_commands import CleanupOldTrash
from schoolvault.core.config import settings
from schoolvault.core.container import (
    get_cleanup_old_trash_handler,
    get_database,
    get_logger,
)
from schoolvault.core.result import Failure, Success


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trash_cleanup",
        description="Purge records trashed longer than the retention period.",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=settings.trash_retention_days,
        help="Retention period in days (default: %(default)s)",
    )
    return parser


async def run_cleanup(days: int) -> CleanupReport | None:
    """Run one cleanup pass.

    Returns:
        CleanupReport, or None if the database is unreachable or the
        handler rejects the retention period.
    """
    logger = get_logger().bind(job="trash_cleanup", retention_days=days)
    db = get_database()

    try:
        if not await db.check_connection():
            logger.critical("trash_cleanup_database_unreachable")
            return None

        async with db.get_session() as session:
            result = await get_cleanup_old_trash_handler(session).handle(
                CleanupOldTrash(days=days)
            )

        match result:
            case Success(value=report):
                return report
            case Failure(error=error):
                logger.error("trash_cleanup_rejected", error_code=error.code.value)
                return None
    finally:
        await db.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.days < 1:
        print("--days must be at least 1", file=sys.stderr)
        return 2

    report = asyncio.run(run_cleanup(args.days))
    if report is None:
        return 1

    print(
        f"purged_users={report.purged_users} "
        f"purged_students={report.purged_students} "
        f"cutoff={report.cutoff.isoformat()}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
