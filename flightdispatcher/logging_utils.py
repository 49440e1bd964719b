"""Mini README: Application-wide logging helpers for the flight dispatcher.

Structure:
    * get_logger - module logger factory used across the package.
    * configure_root_logger - set the root level, installing the handler once.
    * level_for_environment / configure_for_environment - pick the level
      from the ``environment`` setting (DEBUG while developing).

Usage:
    Every module declares ``LOGGER = get_logger(__name__)``. Importing a
    module only guarantees a handler exists; levels are chosen by the entry
    point (``dispatcher_cli.py``) once settings are known. The stream
    handler is attached a single time per process, so uvicorn's reloader or
    repeated CLI invocations in tests never duplicate log lines.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def _ensure_handler() -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger = logging.getLogger()
        root_logger.addHandler(_handler)
        if root_logger.level == logging.WARNING:
            root_logger.setLevel(logging.INFO)
    return _handler


def configure_root_logger(level: int = logging.INFO) -> None:
    """Apply ``level`` to the root logger; safe to call repeatedly."""

    _ensure_handler()
    logging.getLogger().setLevel(level)


def level_for_environment(environment: str) -> int:
    """Map an environment label onto a logging level."""

    return logging.DEBUG if environment.strip().lower() == "development" else logging.INFO


def configure_for_environment(environment: str) -> int:
    """Configure logging for ``environment`` and return the level applied."""

    level = level_for_environment(environment)
    configure_root_logger(level)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, making sure output has somewhere to go."""

    _ensure_handler()
    return logging.getLogger(name)
