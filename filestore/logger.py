"""Logging setup for the filestore package.

All loggers live under the ``filestore`` namespace. Importing the package only
attaches a ``NullHandler``, so records propagate to whatever the embedding
application configured. ``setup_logging`` adds a rich handler for standalone
use; the command line calls it.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler


ROOT_LOGGER_NAME = "filestore"
ENV_LOG_LEVEL = "LOG_LEVEL"

_configured = False

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the package root logger.

    Args:
        level: A logging level name or number. Defaults to the ``LOG_LEVEL``
            environment variable, then ``INFO``.

    Returns:
        The configured ``filestore`` root logger.
    """
    global _configured

    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, "INFO")
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        _configured = True
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Returns:
        A logger under the ``filestore`` namespace.
    """
    return logging.getLogger(name)
