"""Console logging setup for venomock.

venomock modules log through ``logging.getLogger(__name__)``; nothing is
printed unless the application or test session configures logging. This
helper attaches a single console handler to the ``venomock`` logger.

Example:
    >>> from venomock.log import configure_logging
    >>> configure_logging(level="DEBUG")
"""

from __future__ import annotations

import logging
import sys

from rich.logging import RichHandler

LOGGER_NAME = "venomock"


def configure_logging(level: int | str = logging.INFO, rich_output: bool = True) -> logging.Logger:
    """Configure the ``venomock`` logger.

    Args:
        level: Minimum log level, as a number or a level name.
        rich_output: Use rich's console handler instead of a plain stream handler.

    Returns:
        The configured logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.propagate = False

    handler: logging.Handler
    if rich_output:
        handler = RichHandler(show_path=False, rich_tracebacks=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    handler.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return root_logger
