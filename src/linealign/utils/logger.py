"""Minimal logging utilities for linealign.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from linealign.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Narrowing around line %d", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "linealign." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'linealign.mymodule'
    """
    # Ensure linealign prefix for consistent namespacing
    if not (name == "linealign" or name.startswith("linealign.")):
        name = f"linealign.{name}"
    return logging.getLogger(name)
