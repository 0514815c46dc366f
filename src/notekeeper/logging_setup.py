"""Logging configuration for the ``notekeeper`` logger tree.

Diagnostics always go to stderr so stdout carries nothing but note
output.  Rich's handler is used when Rich is importable.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "notekeeper"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
    return handler


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Calling this more than once only adjusts the level; handlers are
    installed a single time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    if not logger.handlers:
        logger.addHandler(_build_handler())

    logger.debug("Logging configured (verbose=%s)", verbose)
    return logger
