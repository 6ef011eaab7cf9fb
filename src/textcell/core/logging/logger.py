"""
Structured logging configuration for textcell.

textcell is a library first, so it logs quietly: the default level is
WARNING, command output owns stdout and log records go to stderr. structlog
builds the event dictionaries and hands them to the standard library
``logging`` module, which owns the handlers.

Events from the text engine often carry user text (a search needle, the
content being rejected). String fields longer than ``MAX_FIELD_LENGTH``
codepoints are clipped before rendering so a single event never dumps a
whole document into the log.

Functions:
    setup_logging(): Initialize logging configuration
    get_logger(name): Get configured logger instance
    clip_long_fields(): structlog processor shortening long string fields

Configuration:
    Logging behavior is controlled by textcell settings:
    - TEXTCELL_LOG_LEVEL: Minimum log level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    - TEXTCELL_LOG_FORMAT: Output format (json/text)
    - TEXTCELL_LOG_FILE_PATH: Optional file output path
    - TEXTCELL_DEBUG: Rich console output on stderr

Example:
    >>> from textcell.core.logging.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Memo hit", operation="snake", delimiter="_")
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import structlog
from rich.console import Console
from rich.logging import RichHandler

from textcell.core.config.settings import settings

MAX_FIELD_LENGTH = 200

# Keys structlog itself fills in; never clipped
_RESERVED_KEYS = {"event", "logger", "level", "timestamp", "exception", "stack"}


def clip_long_fields(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Shorten string values longer than MAX_FIELD_LENGTH, noting the original size."""
    for key, value in event_dict.items():
        if key in _RESERVED_KEYS or not isinstance(value, str):
            continue
        if len(value) > MAX_FIELD_LENGTH:
            event_dict[key] = f"{value[:MAX_FIELD_LENGTH]}... ({len(value)} chars)"
    return event_dict


def _build_processors() -> List[Any]:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        clip_long_fields,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _build_handlers() -> List[logging.Handler]:
    """Rich console in debug/development, plain stderr otherwise, plus an optional file."""
    if settings.DEBUG or settings.ENVIRONMENT == "development":
        console_handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=True,
            markup=False,
            rich_tracebacks=True,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)

    handlers = [console_handler]
    if settings.LOG_FILE_PATH:
        file_path = Path(settings.LOG_FILE_PATH)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(settings.LOG_LEVEL)
    return handlers


def setup_logging() -> None:
    """
    Initialize structlog and standard library logging from the settings.

    Root handlers are only installed when the root logger has none, so an
    application that configured logging before importing textcell keeps its
    own handlers.

    Example:
        >>> from textcell.core.logging.logger import setup_logging
        >>> setup_logging()  # Call once at application startup
    """
    structlog.configure(
        processors=_build_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if logging.getLogger().handlers:
        return

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        handlers=_build_handlers(),
        format="%(message)s",
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structured logger instance.

    Args:
        name (str): Logger name, typically __name__ of the calling module

    Returns:
        structlog.BoundLogger: Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Rejected input", value_type="list")

    Note:
        If logging hasn't been configured yet, this function will
        automatically call setup_logging() to ensure proper initialization.
    """
    if not structlog.is_configured():
        setup_logging()
    return structlog.get_logger(name)


# Setup logging on import
setup_logging()
