"""Logging helpers."""

import logging

from carddeck.config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start. The library never configures logging itself."""
    level = (level or config.logging.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    """Return the named module logger, normally called with ``__name__``."""
    return logging.getLogger(name)
