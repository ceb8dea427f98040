"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL, or SQLite for local runs and tests)
- Logging (structlog console adapter)
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from schoolvault.core.config import settings
from schoolvault.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from schoolvault.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Prefer get_db_session() for per-operation sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        lock_timeout_ms=settings.db_lock_timeout_ms,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (operation-scoped).

    Commits on success, rolls back on exception.

    Usage:
        async for session in get_db_session():
            handler = get_move_to_trash_handler(session)
            result = await handler.handle(cmd)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from schoolvault.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.uses_json_logs,
        level="DEBUG" if settings.debug else settings.log_level,
    )
