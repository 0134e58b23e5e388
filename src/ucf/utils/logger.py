"""Minimal logging utilities for ucf.

Provides a simple get_logger function that wraps the standard library logging.
The library never configures handlers; applications decide where output goes.

Example:
    >>> from ucf.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ucf." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'ucf.mymodule'
    """
    if not (name == "ucf" or name.startswith("ucf.")):
        name = f"ucf.{name}"
    return logging.getLogger(name)
