"""Logging setup: rich-formatted records on stderr.

Report output never goes through logging.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "termreport"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling it again replaces the previous handler instead of stacking.

    Args:
        level: Logging level name or number

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
