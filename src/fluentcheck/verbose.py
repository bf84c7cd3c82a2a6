"""Opt-in logging of failed checks.

Checks log through children of the ``fluentcheck`` logger: every failure at
DEBUG (``fluentcheck.logic``), failures collected by :func:`check_all` at INFO
(``fluentcheck.reporting``) and settings loads at DEBUG (``fluentcheck.config``).
Nothing is emitted until :func:`enable_check_logging` attaches a handler.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "fluentcheck"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def enable_check_logging(
    debug_file: Path | None = None,
    *,
    level: int | str = logging.DEBUG,
    verbose: bool = False,
) -> logging.Logger:
    """
    Record check failures to a file, to stderr, or both.

    Args:
        debug_file: Log file to append to; parent directories are created.
        level: Lowest level recorded. DEBUG shows every failed check, INFO only
            failures collected by ``check_all``.
        verbose: Also write to stderr.

    Returns:
        The ``fluentcheck`` package logger.

    Raises:
        ValueError: If neither a file nor stderr is requested, or the level
            name is unknown.
        RuntimeError: If check logging is already enabled.
    """
    if debug_file is None and not verbose:
        raise ValueError("Nothing to log to: pass debug_file or verbose=True")
    resolved = _resolve_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        raise RuntimeError(
            f"Check logging already enabled on '{PACKAGE_LOGGER}'; "
            "call disable_check_logging() first"
        )

    logger.disabled = False
    logger.setLevel(resolved)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Check logging enabled at {logging.getLevelName(resolved)}")
    return logger


def disable_check_logging() -> None:
    """Detach and close the handlers added by :func:`enable_check_logging`."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
