"""Self-diagnostics for the facade, routed through the standard ``logging`` module.

Purpose
    Let operators see what the dispatch engine hands to appenders (and why a
    setting was ignored) without the facade logging through itself.

Contents
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``log_debug`` / ``log_info``: emit structured entries via a
      single private emitter.
    - ``make_event``: builds the payload describing one append.
    - ``trace_append``: emits ``make_event`` at debug level.

System Integration
    The dispatch engine calls :func:`trace_append` when
    :attr:`lib_context_log.application.defaults.Defaults.debug` is enabled;
    configuration and formatting helpers report ignored input through
    :func:`log_debug`.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_context_log")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers.

    Why
        Leaves the library silent by default while giving host applications full
        control over handler and formatter configuration.
    """

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry."""

    _emit(logging.INFO, message, fields)


def make_event(
    appender: object,
    level: object,
    fields: Mapping[str, Any] | None,
    msg: str,
) -> dict[str, Any]:
    """Build the structured payload describing a single append.

    Examples
    --------
    >>> class Sink:
    ...     pass
    >>> make_event(Sink(), "INFO", {"size": 2}, "Hello Bob")
    {'appender': 'Sink', 'level': 'INFO', 'fields': {'size': 2}, 'msg': 'Hello Bob'}
    """

    return {
        "appender": type(appender).__name__,
        "level": str(level),
        "fields": dict(fields) if fields else {},
        "msg": msg,
    }


def trace_append(appender: object, level: object, fields: Mapping[str, Any] | None, msg: str) -> None:
    """Record that *appender* is about to receive an entry."""

    log_debug("append", **make_event(appender, level, fields, msg))


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": dict(fields)})
