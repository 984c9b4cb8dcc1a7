"""Immutable per-call logging context.

Purpose
-------
Carry the per-call configuration of the facade (threshold level, appender,
field source) plus arbitrary request values, as an explicit value threaded
through every log call.

Contents
--------
* :class:`LogContext` – frozen value object with copy-on-derive helpers.
* :data:`BACKGROUND` – the well-known empty context.

System Role
-----------
The dispatch engine reads the three attachments through the accessors in
:mod:`lib_context_log.application.dispatch`. Deriving a context never touches
its parent, so a context may be shared freely across threads once built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .fields import FieldSource, as_field_source
from .levels import Level

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..application.ports import Appender


@dataclass(frozen=True, slots=True, eq=False)
class LogContext:
    """Configuration bundle handed to every log function.

    Why
    ----
    Replaces a globally configured logger: each request or task derives its
    own context (for example a more verbose level, or request identifiers as
    fields) without affecting anyone else.

    What
    ----
    ``None`` for an attachment means "fall back to the process default".
    Contexts compare by identity, like the request objects they usually
    travel with.

    Examples
    --------
    >>> base = LogContext()
    >>> child = base.with_level(Level.DEBUG).with_value("request_id", "r-1")
    >>> base.level is None, child.level
    (True, <Level.DEBUG: 5>)
    >>> child.value("request_id")
    'r-1'
    """

    level: Level | None = None
    appender: Appender | None = None
    field_source: FieldSource | None = None
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def with_level(self, level: Level) -> LogContext:
        """Return a child context with *level* as its threshold."""

        return replace(self, level=Level(level))

    def with_appender(self, appender: Appender) -> LogContext:
        """Return a child context routing entries to *appender*."""

        return replace(self, appender=appender)

    def with_fields(self, source: object) -> LogContext:
        """Return a child context with *source* as its field source.

        *source* may be a mapping, a zero-argument callable, a
        ``(ctx, level, fields, args)`` callable, or a ready-made variant; see
        :func:`lib_context_log.domain.fields.as_field_source`. The previous
        field source, if any, is replaced rather than combined.
        """

        return replace(self, field_source=as_field_source(source))

    def with_value(self, key: str, value: Any) -> LogContext:
        """Return a child context that also carries ``key=value``."""

        return replace(self, values={**self.values, key: value})

    def value(self, key: str, default: Any = None) -> Any:
        """Return the request value stored under *key* or *default*."""

        return self.values.get(key, default)


BACKGROUND = LogContext()
"""Empty context; its appender always resolves to the process default."""
