"""Logging configuration."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "IDENTICONS_LOG_LEVEL"
LOG_FORMAT = "%(message)s"


def setup_logging(verbose: bool = False, level: str | int | None = None) -> None:
    """Configure root logging with a rich handler on stderr.

    Args:
        verbose: Use DEBUG instead of WARNING when no level is given.
        level: Explicit level name or number.
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.WARNING
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def setup_logging_from_env() -> None:
    """Configure logging from ``IDENTICONS_LOG_LEVEL`` (default INFO)."""
    setup_logging(level=os.environ.get(LOG_LEVEL_ENV, "INFO"))
