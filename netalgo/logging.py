"""Package-wide logging for netalgo.

Every module logs through a child of the ``netalgo`` logger obtained with
:func:`get_logger`. Only that package logger owns a handler (stdout by
default); children stay at ``NOTSET`` and defer to it. Records still
propagate to the Python root logger, which is where pytest's ``caplog``
listens.

Algorithms log sizes and result counts at DEBUG and resource warnings at
WARNING. The CLI maps ``--verbose``/``--quiet`` to a level with
:func:`level_for_flags`.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "netalgo"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single netalgo handler; later calls are no-ops.

    Args:
        level: Initial level of the ``netalgo`` logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Handler to install instead of a stdout ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package = _package_logger()
    package.handlers[:] = [handler]
    package.setLevel(level)
    package.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` (usually ``__name__``)."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the netalgo logger and its handler."""
    setup_root_logger()
    package = _package_logger()
    package.setLevel(level)
    for handler in package.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Translate CLI verbosity flags into a logging level.

    ``verbose`` wins when both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the netalgo handler so the next setup starts fresh (for tests)."""
    global _configured
    _configured = False
    package = _package_logger()
    package.handlers.clear()
    package.setLevel(logging.NOTSET)


setup_root_logger()
