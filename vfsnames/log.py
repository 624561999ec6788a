"""Package logger.

Modules obtain their own logger with ``logger.getChild(__name__)`` so
that every record is routed through the ``vfsnames`` hierarchy.
"""

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger("vfsnames")

FORMAT = "%(levelname)s: %(message)s"


def setup(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Args:
        level: Log level for the package logger.
        stream: Output stream, stderr by default.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
