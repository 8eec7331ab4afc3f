"""Database connection and session management.

Repositories talk to PostgreSQL through SQLAlchemy Core on an async engine
(asyncpg driver). One session per request, see ProdPersistenceProvider.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database.

    Args:
        settings: Application settings with database URL and pool limits

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": "agora-api"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request-scoped sessions.

    Objects are not expired on commit because mapped rows are turned into
    frozen domain models before the request ends.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
