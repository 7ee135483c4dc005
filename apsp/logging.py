"""Logging for the apsp solvers.

``apsp.solver``, ``apsp.matrix`` and ``apsp.vectorized`` each log through a
child of the ``apsp`` logger obtained with ``get_logger(__name__)``. Solver
construction and relaxation summaries go out at DEBUG; negative input
weights are reported at WARNING. Only the ``apsp`` logger owns a handler,
installed once at import time and writing to stdout.

Example:
    >>> from apsp.logging import enable_debug_logging
    >>> enable_debug_logging()  # show per-solve update counts
"""

import logging
import sys
from typing import Optional

#: Name of the package logger all module loggers hang off.
ROOT_LOGGER_NAME = "apsp"

# Set once the apsp logger has its handler
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the handler for solver and validation messages.

    Does nothing if a handler is already installed; call ``reset_logging()``
    first to replace it.

    Args:
        level: Threshold for the ``apsp`` logger. INFO hides relaxation
            summaries but keeps negative-weight warnings.
        format_string: Record format; defaults to time, logger, level, message.
        handler: Destination; defaults to a StreamHandler on stdout.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for one apsp module.

    Args:
        name: Dotted module name under ``apsp``, normally ``__name__``.

    Returns:
        Logger with no level of its own, so it follows ``apsp``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the threshold for every apsp module at once.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.WARNING).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show solver construction and relaxation update counts."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Hide DEBUG solver messages again."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the apsp handler and level so tests start clean."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
