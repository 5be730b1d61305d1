"""
Logging utilities.

Every localrag logger propagates to the package logger ``localrag``, which
owns the single stderr handler.
"""

import logging
import sys

PACKAGE_LOGGER = "localrag"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger whose records reach the package handler
    """
    _package_logger()
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """
    Set the log level for every localrag logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    _package_logger().setLevel(level)
