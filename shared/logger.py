"""Logging setup for the command-line tools."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logger(name: str, level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Configure a logger that writes through rich to stderr.

    Calling it again for the same name only updates the level.

    Args:
        name: Logger name (child loggers inherit the handler)
        level: Log level name or number

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)
