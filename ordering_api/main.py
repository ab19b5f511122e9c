"""FastAPI application main entry point."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ordering.domain.exceptions import (
    ForeignKeyNotFoundError,
    InvalidProfitPeriodError,
    StoreUnavailableError,
)
from ordering.infrastructure.database.lifecycle import (
    close_database,
    get_session_factory,
    init_database,
)
from ordering.infrastructure.database.seed import seed_reference_data
from ordering.infrastructure.logging import configure_logging
from ordering.settings import AppSettings, get_app_settings

from ordering_api.v1.endpoints import health, orders, profit

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and dispose of it on shutdown."""
    settings: AppSettings = app.state.settings
    logger.info("🚀 Order Service API starting up...")

    await init_database(settings.database, create_tables=settings.seed_reference_data)

    if settings.seed_reference_data:
        async with get_session_factory()() as session:
            await seed_reference_data(session)

    yield

    await close_database()
    logger.info("Order Service API shut down")


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def foreign_key_not_found_handler(request: Request, exc: ForeignKeyNotFoundError) -> JSONResponse:
    """Referenced status/product/service missing → 400 naming the field."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "field": exc.field},
    )


async def invalid_period_handler(request: Request, exc: InvalidProfitPeriodError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error(f"Store unavailable while serving {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Order store unavailable"},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# APP FACTORY
# =============================================================================

def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings (defaults to environment settings)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_app_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="Create, list and update commerce orders and report monthly profit.",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing."""
        start_time = time.time()
        logger.info(f"→ {request.method} {request.url.path}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"← {request.method} {request.url.path} "
            f"[{response.status_code}] ({duration:.3f}s)"
        )
        return response

    app.add_exception_handler(ForeignKeyNotFoundError, foreign_key_not_found_handler)
    app.add_exception_handler(InvalidProfitPeriodError, invalid_period_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router)
    app.include_router(orders.router, prefix="/api/v1")
    app.include_router(profit.router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("ordering_api.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
