"""Logging utilities with custom trace level."""

import logging
from typing import Any

# Custom TRACE level, below DEBUG; used for edit-distance internals
TRACE_LEVEL = 5


def add_trace_level() -> None:
    """Register the TRACE level and a ``Logger.trace`` method."""
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    def trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a message with severity 'TRACE'."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, message, args, **kwargs)

    logging.Logger.trace = trace  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    """Get a logger with trace support."""
    if not hasattr(logging.Logger, "trace"):
        add_trace_level()

    return logging.getLogger(name)


def configure_logging(verbose: bool = False, trace: bool = False) -> int:
    """
    Configure root logging for the CLI.

    ``trace`` wins over ``verbose``; without either, INFO is used.

    Returns:
        The level that was configured
    """
    add_trace_level()

    if trace:
        level = TRACE_LEVEL
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    if level <= logging.DEBUG:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        fmt = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=fmt)
    return level
