"""Console logging configuration for dish commands."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "dish",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a console handler to the ``module_name`` logger.

    Calling it again for the same logger only updates the level, so
    importer commands can call it unconditionally at startup.

    Args:
        level: Logging level (default INFO).
        module_name: Logger to configure. ``"dish"`` covers every module
            in the package.
        stream: Output stream, stdout when omitted.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
