# Settings package
from ordering.settings.app import AppSettings, get_app_settings
from ordering.settings.database import DatabaseSettings

__all__ = ["AppSettings", "DatabaseSettings", "get_app_settings"]
