"""Binding onto a :mod:`structlog` logger.

Purpose
-------
Hand facade entries to :mod:`structlog` so its processor chain (timestamps,
JSON rendering, ...) formats them, with the entry's fields bound as
key-value context.

Key behaviours
--------------
* ``logger.bind(**fields)`` then one level method per entry.
* ``PANIC`` and ``FATAL`` are logged with ``critical``; ending the process is
  left to the dispatch engine.
"""

from __future__ import annotations

from typing import Any, Final, Mapping

import structlog

from ...domain.context import LogContext
from ...domain.levels import Level

_METHODS: Final[dict[Level, str]] = {
    Level.PANIC: "critical",
    Level.FATAL: "critical",
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
}


class StructlogAppender:
    """Appender forwarding entries to a structlog bound logger.

    Parameters
    ----------
    logger:
        Bound logger to use. Defaults to ``structlog.get_logger("lib_context_log")``
        resolved once at construction.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self.logger = logger if logger is not None else structlog.get_logger("lib_context_log")

    def append(self, ctx: LogContext, level: Level, fields: Mapping[str, Any], msg: str) -> None:
        bound = self.logger.bind(**fields) if fields else self.logger
        getattr(bound, _METHODS[level])(msg)
