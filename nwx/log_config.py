"""Logging configuration for the nwx CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from nwx.utils import console


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the ``nwx`` logger.

    Diagnostics stay quiet (WARNING) unless *verbose* is set, in which case
    API calls and scaffold writes are logged at DEBUG.
    """
    logger = logging.getLogger("nwx")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Avoid duplicate handlers if called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
