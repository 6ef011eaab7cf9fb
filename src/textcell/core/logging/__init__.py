"""
textcell Logging Module - Structured Application Logging.

Thin package wrapper around :mod:`textcell.core.logging.logger`, which
configures structlog on top of the standard library logging module.

Example:
    >>> from textcell.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Memo hit", operation="studly")
"""

from .logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
