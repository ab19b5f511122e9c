from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from ordering.settings.database import DatabaseSettings


class AppSettings(BaseSettings):
    """
    Central application settings.

    Environment variables use the ORDERS_ prefix; database settings are
    nested and keep their own DB_ prefix.
    """

    api_title: str = "Order Service API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"

    # Status name used by the monthly profit report when none is given
    default_profit_status: str = "Completed"

    # Create tables and load development reference data on startup
    seed_reference_data: bool = False

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    model_config = {
        "env_prefix": "ORDERS_",
        "extra": "ignore",
    }


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
