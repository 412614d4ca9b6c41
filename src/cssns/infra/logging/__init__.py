from __future__ import annotations

from .config import PACKAGE_LOGGER_NAME, LoggingConfig
from .core import configure_logging, get_logger, reset_logging

__all__ = [
    "LoggingConfig",
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
