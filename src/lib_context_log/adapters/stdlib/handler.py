"""Binding onto the standard :mod:`logging` module.

Purpose
-------
Let applications that already configure :mod:`logging` handlers receive facade
entries through them.

Key behaviours
--------------
* Levels map via :meth:`lib_context_log.domain.levels.Level.to_logging`
  (``PANIC`` and ``FATAL`` become ``CRITICAL``).
* Fields travel on the record as ``record.context``, the same convention the
  package's own diagnostics use, so one formatter can render both.
* ``%`` characters in the message are never re-interpreted by :mod:`logging`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...domain.context import LogContext
from ...domain.levels import Level


class LoggingAppender:
    """Appender forwarding entries to a :class:`logging.Logger`.

    Parameters
    ----------
    logger:
        Target logger. Defaults to the root logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger()

    def append(self, ctx: LogContext, level: Level, fields: Mapping[str, Any], msg: str) -> None:
        self.logger.log(level.to_logging(), "%s", msg, extra={"context": dict(fields)})
