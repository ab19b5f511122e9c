"""
Database configuration.

Loaded from environment variables with the DB_ prefix.
"""
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Database configuration settings.

    Plain `postgresql://` and `sqlite://` URLs are accepted and upgraded to
    their async drivers when the engine is created.
    """

    database_url: str = "sqlite+aiosqlite:///./orders.db"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for debugging)
    echo_sql: bool = False

    model_config = {
        "env_prefix": "DB_",
        "extra": "ignore",
    }
