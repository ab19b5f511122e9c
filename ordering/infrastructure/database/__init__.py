"""Database engine lifecycle and development seeding."""

from .lifecycle import (
    build_async_url,
    close_database,
    create_engine,
    create_schema,
    create_session_factory,
    get_session_factory,
    init_database,
)
from .seed import seed_reference_data

__all__ = [
    "build_async_url",
    "close_database",
    "create_engine",
    "create_schema",
    "create_session_factory",
    "get_session_factory",
    "init_database",
    "seed_reference_data",
]
