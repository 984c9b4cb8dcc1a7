"""Context-bound logger for code that predates explicit contexts.

Purpose
-------
Offer the classic ``logger.info(...)`` calling convention on top of the
context-aware facade by fixing one context at construction.

System Role
-----------
Pure call-site convenience: every method forwards to
:func:`lib_context_log.application.dispatch.dispatch` with the bound context.
Each level has three spellings:

* ``info(*args)`` – same rules as :func:`lib_context_log.core.info`;
* ``infof(template, *args)`` – *template* is substituted only when *args* is
  non-empty;
* ``infoln(*args)`` – arguments are always joined with spaces, never
  substituted.
"""

from __future__ import annotations

from typing import Any

from ..domain.context import LogContext
from ..domain.levels import Level
from .dispatch import dispatch


class Logger:
    """Log methods bound to one :class:`LogContext`.

    Examples
    --------
    >>> from lib_context_log.testing import RecordingAppender
    >>> sink = RecordingAppender()
    >>> log = Logger(LogContext(level=Level.INFO, appender=sink))
    >>> log.infof("Hello %s", "Bob")
    >>> log.warnln("Hello", "Alice", 3)
    >>> log.debug("hidden")
    >>> sink.messages
    ['Hello Bob', 'Hello Alice 3']
    """

    __slots__ = ("ctx",)

    def __init__(self, ctx: LogContext | None = None) -> None:
        self.ctx = ctx

    def __repr__(self) -> str:
        return f"Logger({self.ctx!r})"

    def _printf(self, level: Level, template: Any, args: tuple[Any, ...]) -> None:
        dispatch(self.ctx, level, None, template, *args)

    def _println(self, level: Level, args: tuple[Any, ...]) -> None:
        dispatch(self.ctx, level, None, *args, templated=False)

    def debug(self, *args: Any) -> None:
        dispatch(self.ctx, Level.DEBUG, None, *args)

    def debugf(self, template: Any, *args: Any) -> None:
        self._printf(Level.DEBUG, template, args)

    def debugln(self, *args: Any) -> None:
        self._println(Level.DEBUG, args)

    def info(self, *args: Any) -> None:
        dispatch(self.ctx, Level.INFO, None, *args)

    def infof(self, template: Any, *args: Any) -> None:
        self._printf(Level.INFO, template, args)

    def infoln(self, *args: Any) -> None:
        self._println(Level.INFO, args)

    def print(self, *args: Any) -> None:
        dispatch(self.ctx, Level.INFO, None, *args)

    def printf(self, template: Any, *args: Any) -> None:
        self._printf(Level.INFO, template, args)

    def println(self, *args: Any) -> None:
        self._println(Level.INFO, args)

    def warn(self, *args: Any) -> None:
        dispatch(self.ctx, Level.WARN, None, *args)

    def warnf(self, template: Any, *args: Any) -> None:
        self._printf(Level.WARN, template, args)

    def warnln(self, *args: Any) -> None:
        self._println(Level.WARN, args)

    def error(self, *args: Any) -> None:
        dispatch(self.ctx, Level.ERROR, None, *args)

    def errorf(self, template: Any, *args: Any) -> None:
        self._printf(Level.ERROR, template, args)

    def errorln(self, *args: Any) -> None:
        self._println(Level.ERROR, args)

    def fatal(self, *args: Any) -> None:
        dispatch(self.ctx, Level.FATAL, None, *args)

    def fatalf(self, template: Any, *args: Any) -> None:
        self._printf(Level.FATAL, template, args)

    def fatalln(self, *args: Any) -> None:
        self._println(Level.FATAL, args)

    def panic(self, *args: Any) -> None:
        dispatch(self.ctx, Level.PANIC, None, *args)

    def panicf(self, template: Any, *args: Any) -> None:
        self._printf(Level.PANIC, template, args)

    def panicln(self, *args: Any) -> None:
        self._println(Level.PANIC, args)
