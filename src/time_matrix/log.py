"""Logging setup for the time matrix package."""
import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "time_matrix"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Route the package logger through a single RichHandler.

    Safe to call more than once; existing handlers are replaced.
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric)
    logger.handlers.clear()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
