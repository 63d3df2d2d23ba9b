"""Logging helpers for chatmark.

The library never configures handlers; applications decide where
``chatmark.*`` records go.

Example:
    >>> from chatmark.utils.logger import get_logger
    >>> get_logger("parser").name
    'chatmark.parser'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``chatmark``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "chatmark" or name.startswith("chatmark.")):
        name = f"chatmark.{name}"
    return logging.getLogger(name)
