"""
Database handle and session management.

A Database owns one async engine and its session factory. It is created once
at process start, initialised with init(), handed to whoever needs sessions,
and closed with dispose(). Tests create a fresh handle per test.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from recruiter_ai.core.config import settings
from recruiter_ai.db.base import SCHEMA_VERSION, Base, json_serializer
from recruiter_ai.errors import DatabaseNotInitializedError, SchemaVersionError

logger = logging.getLogger(__name__)

SCHEMA_VERSION_KEY = "schema_version"


def _enable_sqlite_savepoints(engine) -> None:
    """Let SQLite run real transactions and SAVEPOINTs.

    The sqlite drivers emit BEGIN lazily and break nested transactions; hand
    BEGIN over to SQLAlchemy instead.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


class Database:
    """Explicit handle around the async engine."""

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        self.engine = create_async_engine(
            self.url,
            echo=settings.DEBUG if echo is None else echo,  # When True, prints SQL queries
            json_serializer=json_serializer,
            future=True,
        )
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_savepoints(self.engine)

        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keeps data accessible after commit
        )
        self.initialized = False

    async def init(self) -> None:
        """Create missing tables and check the persisted schema version."""
        # Importing the models registers every table on Base.metadata
        import recruiter_ai.models  # noqa: F401
        from recruiter_ai.repositories.settings_repository import SettingsRepository

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with self._session() as session:
            repository = SettingsRepository(session)
            stored = await repository.get(SCHEMA_VERSION_KEY)
            if stored is None:
                await repository.upsert(SCHEMA_VERSION_KEY, SCHEMA_VERSION)
            elif stored.value != SCHEMA_VERSION:
                raise SchemaVersionError(
                    "Stored schema version does not match; run the alembic migrations",
                    details={"stored": stored.value, "expected": SCHEMA_VERSION},
                )

        self.initialized = True
        logger.info("Database ready at %s (schema v%s)", self.engine.url, SCHEMA_VERSION)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        self.initialized = False

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Open a session for one unit of work.

        Commits when the block exits cleanly and rolls back on any exception.

        Usage:
            async with database.session() as db:
                jobs = await JobService(db).list_jobs()
        """
        if not self.initialized:
            raise DatabaseNotInitializedError("Call Database.init() before opening sessions")
        async with self._session() as session:
            yield session

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()


@asynccontextmanager
async def open_database(url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncGenerator[Database, None]:
    """Context manager helper: init a Database and dispose it afterwards."""
    database = Database(url, echo=echo)
    try:
        await database.init()
        yield database
    finally:
        await database.dispose()
