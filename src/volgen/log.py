"""Logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Send ``volgen.*`` log records to a rich handler at ``level``."""
    logger = logging.getLogger("volgen")
    logger.setLevel(level.upper())
    # Re-running the CLI in one process must not stack handlers.
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=console or Console(stderr=True), show_path=False, markup=False)
    )
    return logger
