"""Shared fixtures: in-memory database with the development reference data."""

import uuid
from datetime import datetime
from typing import Sequence, Tuple
from uuid import UUID

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ordering.data.models import Base, OrderItemModel, OrderModel
from ordering.infrastructure.database.seed import (
    PRODUCT_MAILBOX_ID,
    SERVICE_EMAIL_ID,
    seed_reference_data,
)

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory with reference data already seeded."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async with session_factory() as session:
        await seed_reference_data(session)

    yield session_factory


@pytest_asyncio.fixture
async def test_session(test_session_factory):
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


async def _insert_order(
    session_factory: async_sessionmaker,
    status_id: UUID,
    created_date: datetime,
    items: Sequence[Tuple[UUID, UUID, int]] = ((SERVICE_EMAIL_ID, PRODUCT_MAILBOX_ID, 1),),
) -> UUID:
    """Insert an order row directly, bypassing validation, with a fixed timestamp.

    Args:
        session_factory: Session factory to write with
        status_id: Status to store
        created_date: Naive UTC creation time
        items: (service_id, product_id, quantity) tuples

    Returns:
        The new order id
    """
    order_id = uuid.uuid4()
    async with session_factory() as session:
        session.add(
            OrderModel(
                id=order_id,
                reseller_id=uuid.uuid4(),
                customer_id=uuid.uuid4(),
                status_id=status_id,
                created_date=created_date,
            )
        )
        for position, (service_id, product_id, quantity) in enumerate(items):
            session.add(
                OrderItemModel(
                    id=uuid.uuid4(),
                    order_id=order_id,
                    service_id=service_id,
                    product_id=product_id,
                    quantity=quantity,
                    line_number=position,
                )
            )
        await session.commit()
    return order_id


@pytest_asyncio.fixture
async def add_order(test_session_factory):
    """Insert orders with explicit status and creation time."""

    async def _add(status_id: UUID, created_date: datetime, items=None) -> UUID:
        if items is None:
            return await _insert_order(test_session_factory, status_id, created_date)
        return await _insert_order(test_session_factory, status_id, created_date, items)

    return _add
