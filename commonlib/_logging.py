"""Logging helpers shared by every commonlib module."""

from __future__ import annotations

import logging


def null_logger(name: str) -> logging.Logger:
    """
    Return a named logger with a NullHandler attached.

    The library never configures handlers of its own; output only appears
    once the host application sets up logging.
    """
    logger = logging.getLogger(name)
    logger.addHandler(logging.NullHandler())
    return logger
