"""Database Lifecycle Management - Async Version"""

import logging
from typing import Optional

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ordering.settings.database import DatabaseSettings

logger = logging.getLogger(__name__)

# Sync driver name -> async driver name
ASYNC_DRIVERS = {
    "postgresql": "postgresql+asyncpg",
    "postgresql+psycopg2": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def build_async_url(database_url: str) -> URL:
    """Parse a database URL and switch sync drivers to their async variant."""
    url = make_url(database_url)
    if url.drivername in ASYNC_DRIVERS:
        url = url.set(drivername=ASYNC_DRIVERS[url.drivername])
    return url


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings

    Returns:
        Configured async engine
    """
    url = build_async_url(settings.database_url)
    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    if url.get_backend_name() == "sqlite":
        return create_async_engine(url, echo=settings.echo_sql)

    return create_async_engine(
        url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by every Unit of Work."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables if they don't exist."""
    from ordering.data.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_database(settings: DatabaseSettings, create_tables: bool = False) -> None:
    """Initialize async database engine and session factory."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return

    _async_engine = create_engine(settings)
    _async_session_factory = create_session_factory(_async_engine)

    if create_tables:
        await create_schema(_async_engine)

    logger.info("✅ Database initialized successfully")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        logger.info("Closing database connections...")
        await _async_engine.dispose()

    _async_engine = None
    _async_session_factory = None
