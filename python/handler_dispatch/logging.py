"""Structured logging for handler dispatch.

Thin structured-logging layer over the standard ``logging`` package.
Every function takes a message plus optional fields (a dict or a
LogContext); fields are rendered as ``key=value`` pairs after the
message and also attached to the record as ``fields``.

Example:
    >>> from handler_dispatch import log_debug, configure_logging
    >>>
    >>> configure_logging("debug")
    >>> log_debug("Resolved handler", {"descriptor": "Billing@charge"})
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from .types import LogContext

LOGGER_NAME = "handler_dispatch"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str = "info", stream: Any = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once replaces the handler installed by the
    previous call instead of stacking another one.

    Args:
        level: Level name (trace, debug, info, warn, error).
        stream: Output stream, defaults to stderr.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric = _LEVELS.get(level.lower())
    if numeric is None:
        raise ValueError(f"Unknown log level: {level!r}")

    for handler in list(_logger.handlers):
        if getattr(handler, "_handler_dispatch", False):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._handler_dispatch = True  # type: ignore[attr-defined]
    _logger.addHandler(handler)
    _logger.setLevel(numeric)
    return _logger


def log_error(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an ERROR level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.ERROR, message, fields)


def log_warn(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a WARN level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.WARNING, message, fields)


def log_info(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an INFO level message with structured fields."""
    _emit(logging.INFO, message, fields)


def log_debug(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a DEBUG level message with structured fields."""
    _emit(logging.DEBUG, message, fields)


def log_trace(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a TRACE level message with structured fields.

    Very verbose; used for cache hits and individual lookup probes.
    """
    _emit(TRACE, message, fields)


def _emit(level: int, message: str, fields: dict[str, Any] | LogContext | None) -> None:
    if not _logger.isEnabledFor(level):
        return

    fields_dict = _normalize_fields(fields)
    if fields_dict:
        rendered = " ".join(f"{k}={v}" for k, v in fields_dict.items())
        message = f"{message} [{rendered}]"
    _logger.log(level, message, extra={"fields": fields_dict or {}})


def _normalize_fields(
    fields: dict[str, Any] | LogContext | None,
) -> dict[str, str] | None:
    """Normalize fields to a dict of strings.

    Args:
        fields: Input fields as dict, LogContext, or None.

    Returns:
        Dict with string values, or None if no fields.
    """
    if fields is None:
        return None

    if isinstance(fields, LogContext):
        return {k: str(v) for k, v in fields.model_dump().items() if v is not None}

    return {k: str(v) for k, v in fields.items()}


__all__ = [
    "LOGGER_NAME",
    "TRACE",
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
