"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi import Request

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from ordering.application.services.order_service import OrderApplicationService  # noqa: E402
from ordering.infrastructure.database.lifecycle import get_session_factory  # noqa: E402
from ordering.settings import AppSettings  # noqa: E402


def get_settings(request: Request) -> AppSettings:
    """Get the settings the running app was created with.

    Returns:
        AppSettings instance
    """
    return request.app.state.settings


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService bound to the global session factory
    """
    return OrderApplicationService(get_session_factory())
