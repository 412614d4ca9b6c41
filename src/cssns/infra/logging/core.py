from __future__ import annotations

"""
Logging Core.

Opt-in diagnostics for the library. Handlers are attached to the package
logger only, never to the root logger, and configuration is idempotent:
repeated calls do not stack handlers unless a re-configuration is forced.
"""

import logging
import sys
from typing import List

from cssns.infra.logging.config import _LEVEL_MAP, PACKAGE_LOGGER_NAME, LoggingConfig
from cssns.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_cssns_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach diagnostic handlers to the package logger.

    Args:
        cfg: Structural configuration for the diagnostics.
        force: If True, drop previously attached handlers and re-initialize.

    Returns:
        logging.Logger: The package logger.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if getattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return pkg_logger

    level_int = _parse_level(cfg.level)
    pkg_logger.setLevel(level_int)
    _remove_our_handlers(pkg_logger)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    for handler in handlers_list:
        pkg_logger.addHandler(handler)

    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)
    return pkg_logger


def reset_logging() -> None:
    """Detach every handler installed by configure_logging."""
    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_our_handlers(pkg_logger)
    pkg_logger.setLevel(logging.NOTSET)
    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger (usually __name__).

    Args:
        name: Hierarchical logger name.

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(pkg_logger: logging.Logger) -> None:
    for h in list(pkg_logger.handlers):
        if _is_our_handler(h):
            pkg_logger.removeHandler(h)
            h.close()
