"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "fitparse-cli"


def log_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Library modules only call ``logging.getLogger(__name__)``; handlers are
    installed here, once per process.
    """
    level = log_level(verbose, quiet)
    logger = logging.getLogger("fitparse")
    logger.setLevel(level)

    # Avoid duplicate handlers
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
