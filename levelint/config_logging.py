"""Logging configuration for levelint.

Diagnostics from the differencing loops go through the standard ``logging``
module; this is the single place where handlers and formats are set up.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from levelint.constants import LOG_DATE_FORMAT, LOG_FORMAT


def _resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> None:
    """Configure root logging for the project.

    Args:
        level: Logging level, numeric or by name (default: INFO).
        stream: Output stream for the handler. Defaults to stdout.
    """
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[
            logging.StreamHandler(stream if stream is not None else sys.stdout),
        ],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger instance.
    """
    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        setup_logging()
    return logger
