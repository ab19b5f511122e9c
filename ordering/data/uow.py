"""Unit of Work pattern for atomic transactions."""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.domain.exceptions import StoreUnavailableError

from .repositories.catalog_repository_impl import SqlAlchemyCatalogRepository
from .repositories.order_repository_impl import SqlAlchemyOrderRepository

logger = logging.getLogger(__name__)

# Storage failures surfaced to callers as StoreUnavailableError.
# Async drivers (asyncpg) raise OSError / asyncio.TimeoutError on connect
# without SQLAlchemy wrapping them.
STORE_FAILURES = (
    OperationalError,
    InterfaceError,
    PoolTimeoutError,
    OSError,
    asyncio.TimeoutError,
)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories
    4. Translate connectivity failures into StoreUnavailableError

    Usage:
        async with create_uow(session_factory) as uow:
            detail = await uow.orders.create_order(...)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._catalog_repository: Optional[SqlAlchemyCatalogRepository] = None
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back on exception and always close the session."""
        try:
            try:
                if exc_type is not None:
                    logger.warning(f"Transaction rolled back: {exc_type.__name__}")
                    await self._session.rollback()
            finally:
                await self._session.close()
        except STORE_FAILURES as cleanup_error:
            # Connection lost mid-transaction: rollback/close fail too
            logger.error(f"❌ Store unavailable during cleanup: {cleanup_error}")
            raise StoreUnavailableError(str(cleanup_error)) from (exc_val or cleanup_error)

        if isinstance(exc_val, STORE_FAILURES):
            logger.error(f"❌ Store unavailable: {exc_val}")
            raise StoreUnavailableError(str(exc_val)) from exc_val

    @property
    def catalog(self) -> SqlAlchemyCatalogRepository:
        """Lazy-load catalog lookup.

        Returns:
            SqlAlchemyCatalogRepository instance
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        if self._catalog_repository is None:
            self._catalog_repository = SqlAlchemyCatalogRepository(self._session)
        return self._catalog_repository

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self._session, self.catalog)
        return self._order_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        await self._session.commit()
        logger.info("✅ Transaction committed")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
