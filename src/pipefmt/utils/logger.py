"""Minimal logging utilities for pipefmt.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pipefmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering table")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``pipefmt``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("machine").name
        'pipefmt.machine'
    """
    if not (name == "pipefmt" or name.startswith("pipefmt.")):
        name = f"pipefmt.{name}"
    return logging.getLogger(name)
