"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from eventflow.config import Settings

APPLICATION_NAME = "eventflow-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    SQL is echoed in debug mode. Connections are pinged on checkout and
    tagged with the application name so they show up in pg_stat_activity.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Repositories flush explicitly and the request commits once, so objects
    stay readable after commit and nothing autoflushes.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
