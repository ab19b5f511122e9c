"""Pytest configuration and fixtures for integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from ordering.settings import AppSettings, DatabaseSettings
from ordering_api.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> AppSettings:
    """Settings pointing at a throwaway SQLite file, seeded on startup."""
    return AppSettings(
        seed_reference_data=True,
        database=DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}"),
    )


@pytest.fixture
def test_client(test_settings) -> Generator[TestClient, None, None]:
    """Create FastAPI test client; the context manager runs the app lifespan."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
