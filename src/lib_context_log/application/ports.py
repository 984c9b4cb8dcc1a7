"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contract a logging backend must satisfy to receive
entries from the dispatch engine, without the engine depending on any concrete
implementation.

Contents
--------
* :class:`Appender` – the single backend capability.

System Role
-----------
Every adapter under :mod:`lib_context_log.adapters` implements this protocol.
Contexts carry an appender; the dispatch engine calls it at most once per
emitted entry, synchronously, on the caller's thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..domain.context import LogContext
    from ..domain.levels import Level


@runtime_checkable
class Appender(Protocol):
    """Render or transport one finished log entry.

    Why
    ----
    Keeps formatting and transport swappable (streams, :mod:`logging`,
    :mod:`structlog`) while the facade owns filtering, field resolution and
    message formatting.

    Contract
    --------
    ``append`` has no return value and no error channel. It may block, allocate
    or raise; the dispatch engine neither inspects nor retries. ``FATAL`` and
    ``PANIC`` handling happens in the engine after ``append`` returns, so
    appenders only need to record the entry.
    """

    def append(self, ctx: LogContext, level: Level, fields: Mapping[str, Any], msg: str) -> None:
        """Record *msg* at *level* with its structured *fields*."""
