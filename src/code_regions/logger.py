"""Logging configuration for code-regions with custom verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels between the standard ones
CHANGES_LEVEL = 25  # Between INFO (20) and WARNING (30) - style definitions, painted spans
CHECKS_LEVEL = 15  # Between DEBUG (10) and INFO (20) - cache hits, skipped spans

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0  # Warnings and errors only
VERBOSITY_CHANGES = 1  # Show style definitions and painted spans
VERBOSITY_CHECKS = 2  # Show cache hits and skipped regions
VERBOSITY_DEBUG = 3  # Full debug output, including swallowed host failures

LOGGER_NAME = "code_regions"


class RegionsLogger(logging.Logger):
    """Logger with semantic verbosity methods.

    - changes(): verbosity level 1 - host styles defined, ranges painted
    - checks(): verbosity level 2 - cache hits and no-op decisions
    - debug(): verbosity level 3 - host failures and color math
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log changes (verbosity level 1)."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log checks (verbosity level 2)."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> RegionsLogger:
    """Get the code-regions logger instance (singleton).

    Returns:
        The package logger singleton instance
    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(RegionsLogger)
    try:
        logger = logging.getLogger(LOGGER_NAME)
    finally:
        logging.setLoggerClass(previous)
    if not isinstance(logger, RegionsLogger):
        raise TypeError(f"Logger {LOGGER_NAME!r} was created before RegionsLogger was installed")
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the code-regions logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (warnings only), 1=changes, 2=checks, 3=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.WARNING,
        VERBOSITY_CHANGES: CHANGES_LEVEL,
        VERBOSITY_CHECKS: CHECKS_LEVEL,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(verbosity, logging.WARNING))

    output_stream = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to clean state.

    Useful for testing to ensure clean state between tests.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True
