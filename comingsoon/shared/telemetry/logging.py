"""Logging configuration for the launch service."""

import logging
import sys

from comingsoon.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-tick countdown logs are DEBUG; these third-party loggers stay at WARNING unless debugging.
_NOISY_LOGGERS = ("asyncio", "httpx", "websockets")


def setup_logging(debug: bool | None = None) -> None:
    """Configure process-wide logging to stdout.

    Args:
        debug: Force DEBUG (True) or INFO (False); None reads settings.debug.
    """
    if debug is None:
        debug = get_settings().debug
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
