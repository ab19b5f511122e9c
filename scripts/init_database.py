"""
Create the order store schema and seed development reference data.

Usage:
    DB_DATABASE_URL=sqlite+aiosqlite:///./orders.db python scripts/init_database.py
"""
import asyncio
import logging

from dotenv import load_dotenv

from ordering.infrastructure.database import (
    create_engine,
    create_schema,
    create_session_factory,
    seed_reference_data,
)
from ordering.infrastructure.logging import configure_logging
from ordering.settings import DatabaseSettings

logger = logging.getLogger(__name__)


async def main() -> None:
    settings = DatabaseSettings()
    engine = create_engine(settings)

    try:
        logger.info("=" * 80)
        logger.info("DATABASE INITIALIZATION")
        logger.info("=" * 80)

        await create_schema(engine)
        logger.info("✅ Schema created")

        session_factory = create_session_factory(engine)
        async with session_factory() as session:
            await seed_reference_data(session)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    load_dotenv()
    configure_logging("INFO")
    asyncio.run(main())
