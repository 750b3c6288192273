"""
Logging configuration for the artifact store.

Configures structlog on top of the standard library logging module, with a
human-readable text renderer (default) or a JSON renderer.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict

COLORS = {
    "debug": "\033[36m",
    "info": "\033[32m",
    "warning": "\033[33m",
    "error": "\033[31m",
    "critical": "\033[35m",
    "reset": "\033[0m",
}


def add_color(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Wrap the level name in ANSI color codes for console output."""
    level_color = COLORS.get(method_name, COLORS["reset"])
    if "level" in event_dict:
        event_dict["level"] = f"{level_color}{event_dict['level'].upper()}{COLORS['reset']}"
    return event_dict


def human_readable_renderer(
    logger: Any,
    method_name: str,
    event_dict: EventDict
) -> str:
    """
    Render a log line as: [timestamp] [level] [logger] message key=value ...

    Example: [2025-01-14 10:30:45] [INFO] [artifact_store.rest] Version uploaded project=acme version=1.0.0
    """
    timestamp = event_dict.pop("timestamp", "")
    level = event_dict.pop("level", "info")
    # A colored level is already upper-cased; upper() would corrupt its escape codes
    if "\033[" not in level:
        level = level.upper()
    logger_name = event_dict.pop("logger_name", event_dict.pop("logger", "unknown"))
    message = event_dict.pop("event", "")
    exc_info = event_dict.pop("exception", None)

    parts = []
    if timestamp:
        parts.append(f"[{timestamp}]")
    parts.append(f"[{level}]")
    if logger_name != "root":
        parts.append(f"[{logger_name}]")
    parts.append(message)

    for key, value in sorted(event_dict.items()):
        if key == "stack_info":
            continue
        if isinstance(value, (str, int, float, bool)):
            parts.append(f"{key}={value}")
        else:
            parts.append(f"{key}={repr(value)}")

    log_line = " ".join(parts)
    if exc_info:
        log_line += "\n" + exc_info

    return log_line


def configure_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """
    Configure structlog for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "text" (default) or "json"
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(add_color)
        processors.append(human_readable_renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None, **context) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional bound context.

    Example:
        logger = get_logger(__name__)
        logger.info("Version uploaded", project="acme", version="1.0.0")
    """
    if name:
        return structlog.get_logger(name, **context)
    return structlog.get_logger(**context)


def bind_context(**context) -> None:
    """Bind request-scoped context to every logger in the current context."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
