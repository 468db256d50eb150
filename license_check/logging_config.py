"""Logging setup for the license-check command line."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from license_check.models.report import Verbosity

PACKAGE_LOGGER = "license_check"

_LEVELS = {
    Verbosity.QUIET: logging.ERROR,
    Verbosity.NORMAL: logging.WARNING,
    Verbosity.VERBOSE: logging.INFO,
}


def level_for(verbosity: Verbosity) -> int:
    """Return the log level used for a verbosity setting."""
    return _LEVELS[verbosity]


def configure_logging(
    verbosity: Verbosity = Verbosity.NORMAL,
    console: Console | None = None,
) -> logging.Logger:
    """Route package log records to stderr through Rich.

    Calling this again replaces the handler installed by a previous call,
    so repeated CLI invocations in one process do not duplicate output.

    Args:
        verbosity: QUIET logs errors only, NORMAL adds warnings and
            VERBOSE adds informational messages.
        console: Console to write to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level_for(verbosity))
    return logger
