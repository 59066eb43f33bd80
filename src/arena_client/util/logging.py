"""Logging setup for command-line use."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING) -> None:
    """Route log records from arena_client to stderr through Rich.

    Args:
        level: Minimum level to emit (e.g. logging.DEBUG to trace requests).
    """
    handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("arena_client")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
