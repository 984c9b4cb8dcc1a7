"""Process-wide fallback configuration.

Purpose
-------
Hold the values the dispatch engine falls back to when a context carries no
attachment of its own: threshold level, appender, the context substituted for
``None``, and whether appends are traced.

Contents
--------
* :class:`Defaults` – frozen settings object.
* :func:`get_defaults` / :func:`configure_defaults` / :func:`reset_defaults`
  – read and replace the process slot.
* :func:`defaults_from_env` – seed settings from ``LIB_CONTEXT_LOG_*``.

System Role
-----------
The slot holds exactly one immutable :class:`Defaults`. Configuration swaps
the whole object, and the dispatch engine reads it once per call without
caching, so a change is visible to the next log call. Hosts are expected to
configure it once at start-up before logging concurrently.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from ..adapters.env.default import ENV_PREFIX, DefaultEnvLoader
from ..domain.context import BACKGROUND, LogContext
from ..domain.errors import InvalidLevel
from ..domain.levels import Level, parse_level
from ..observability import log_debug, log_info
from .ports import Appender


@dataclass(frozen=True, slots=True)
class Defaults:
    """Fallback values used by the dispatch engine.

    Attributes
    ----------
    level:
        Threshold used when a context carries no level.
    appender:
        Appender used when a context carries none, and always for
        :data:`~lib_context_log.domain.context.BACKGROUND`. ``None`` means
        unset: emitting through it raises
        :class:`~lib_context_log.domain.errors.MissingAppender`.
    context:
        Context substituted when a log function receives ``None``.
    debug:
        Trace every append through the package logger. The package logger
        only carries a ``NullHandler``, so the trace is visible once the host
        attaches a handler to :func:`lib_context_log.get_logger` and lets
        ``DEBUG`` records through.
    """

    level: Level = Level.ERROR
    appender: Appender | None = None
    context: LogContext = BACKGROUND
    debug: bool = False


def defaults_from_env(environ: Mapping[str, str] | None = None) -> Defaults:
    """Build :class:`Defaults` from ``LIB_CONTEXT_LOG_LEVEL`` and ``LIB_CONTEXT_LOG_DEBUG``.

    Unparseable levels are reported through the package logger and ignored.

    Examples
    --------
    >>> settings = defaults_from_env({"LIB_CONTEXT_LOG_LEVEL": "info", "LIB_CONTEXT_LOG_DEBUG": "1"})
    >>> settings.level, settings.debug
    (<Level.INFO: 4>, True)
    >>> defaults_from_env({"LIB_CONTEXT_LOG_LEVEL": "chatty"}).level
    <Level.ERROR: 2>
    """

    settings = DefaultEnvLoader(environ=environ).load(ENV_PREFIX)
    changes: dict[str, Any] = {}
    raw_level = settings.get("level")
    if raw_level is not None:
        try:
            changes["level"] = parse_level(str(raw_level))
        except InvalidLevel as exc:
            log_debug("env_level_ignored", value=raw_level, error=str(exc))
    raw_debug = settings.get("debug")
    if isinstance(raw_debug, (bool, int, float)):
        changes["debug"] = bool(raw_debug)
    elif raw_debug is not None:
        log_debug("env_debug_ignored", value=raw_debug)
    return Defaults(**changes)


_current: Defaults = defaults_from_env()


def get_defaults() -> Defaults:
    """Return the active :class:`Defaults`."""

    return _current


def configure_defaults(**changes: Any) -> Defaults:
    """Replace the active defaults with a copy carrying *changes*.

    Examples
    --------
    >>> previous = get_defaults()
    >>> configure_defaults(level=Level.DEBUG).level
    <Level.DEBUG: 5>
    >>> _ = configure_defaults(level=previous.level)
    """

    global _current
    if "level" in changes:
        changes["level"] = Level(changes["level"])
    _current = replace(_current, **changes)
    log_info("defaults_configured", **{key: repr(value) for key, value in changes.items()})
    return _current


def reset_defaults(environ: Mapping[str, str] | None = None) -> Defaults:
    """Restore the defaults seeded from the environment."""

    global _current
    _current = defaults_from_env(environ)
    return _current
