"""Logging setup: stdlib logging rendered through rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "toybox"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a RichHandler to the toybox logger and set its level.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger
