"""Logging setup shared by the invoice actions and the API that serves them."""

import logging
import sys
from typing import Optional, TextIO, Union

ROOT_LOGGER = "invoice_actions"
HANDLER_NAME = "invoice_actions.console"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[str, int, None]) -> int:
    """Map a level name or number to a ``logging`` level, defaulting to INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[str, int, None] = None, *, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Attach a console handler to the ``invoice_actions`` logger.

    Calling this again (each ``create_app`` does) swaps the handler installed
    by the previous call instead of stacking a second one. Handlers added by
    anything else are left alone. Records do not propagate to the root logger,
    so a server that configures root logging does not print them twice.

    Args:
        level: Level name such as ``"debug"`` or a numeric level.
        stream: Destination for records. Defaults to stdout.

    Returns:
        The package logger.
    """
    log_level = resolve_level(level)
    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger nested under ``invoice_actions``; qualified names pass through."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
