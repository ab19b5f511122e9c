"""
Logging infrastructure.

Provides logging utilities shared by the service and the API.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a stream handler on the root logger.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    root = logging.getLogger()
    if not any(getattr(h, "_ordering_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._ordering_handler = True
        root.addHandler(handler)
    root.setLevel(level.upper())

