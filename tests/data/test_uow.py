"""Tests for UnitOfWork transaction scope and failure translation."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from ordering.data.uow import create_uow
from ordering.domain.exceptions import ForeignKeyNotFoundError, StoreUnavailableError


def _lost_connection() -> OperationalError:
    return OperationalError("ROLLBACK", {}, Exception("server closed the connection unexpectedly"))


def _session_factory(session) -> MagicMock:
    return MagicMock(return_value=session)


def _mock_session(rollback_error=None, close_error=None) -> MagicMock:
    session = MagicMock()
    session.rollback = AsyncMock(side_effect=rollback_error)
    session.close = AsyncMock(side_effect=close_error)
    return session


@pytest.mark.asyncio
async def test_store_failure_in_body_becomes_store_unavailable():
    session = _mock_session()

    with pytest.raises(StoreUnavailableError):
        async with create_uow(_session_factory(session)):
            raise _lost_connection()

    session.rollback.assert_awaited_once()
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_rollback_becomes_store_unavailable():
    session = _mock_session(rollback_error=_lost_connection())

    with pytest.raises(StoreUnavailableError):
        async with create_uow(_session_factory(session)):
            raise _lost_connection()

    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_rollback_after_domain_error_becomes_store_unavailable():
    session = _mock_session(rollback_error=_lost_connection())

    with pytest.raises(StoreUnavailableError) as exc_info:
        async with create_uow(_session_factory(session)):
            raise ForeignKeyNotFoundError("Status with id x does not exist", field="statusId")

    assert isinstance(exc_info.value.__cause__, ForeignKeyNotFoundError)


@pytest.mark.asyncio
async def test_failed_close_becomes_store_unavailable():
    session = _mock_session(close_error=ConnectionResetError("connection reset by peer"))

    with pytest.raises(StoreUnavailableError):
        async with create_uow(_session_factory(session)):
            pass


@pytest.mark.asyncio
async def test_domain_errors_pass_through():
    session = _mock_session()

    with pytest.raises(ForeignKeyNotFoundError):
        async with create_uow(_session_factory(session)):
            raise ForeignKeyNotFoundError("Status with id x does not exist", field="statusId")

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_clean_exit_closes_without_rollback():
    session = _mock_session()

    async with create_uow(_session_factory(session)):
        pass

    session.rollback.assert_not_awaited()
    session.close.assert_awaited_once()
