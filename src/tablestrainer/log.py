"""Logging setup for the command line app."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
PACKAGE_LOGGER = "tablestrainer"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach one stderr handler to the package logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stream_handler.setLevel(level)
    logger.addHandler(stream_handler)
    logger.propagate = False
    return logger
