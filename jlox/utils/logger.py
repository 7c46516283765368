"""Minimal logging utilities for jlox.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from jlox.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "jlox." prefix.

    Example:
        >>> get_logger("scanner").name
        'jlox.scanner'
    """
    if not (name == "jlox" or name.startswith("jlox.")):
        name = f"jlox.{name}"
    return logging.getLogger(name)
