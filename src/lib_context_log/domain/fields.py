"""Context-supplied field sources.

Purpose
-------
Model the three shapes a context may use to contribute structured fields to
every emitted entry, as one closed tagged variant.

Contents
--------
* :class:`StaticFields` – a fixed mapping.
* :class:`LazyFields` – a zero-argument producer invoked per emitted entry.
* :class:`ContextualFields` – a producer receiving ``(ctx, level, fields,
  args)`` that may consume explicit fields.
* :data:`FieldSource` – union of the three variants.
* :func:`as_field_source` – coerce a mapping or callable into a variant.

System Role
-----------
:class:`lib_context_log.domain.context.LogContext` stores at most one variant.
The merge policy in :mod:`lib_context_log.application.merge` calls
``resolve`` only for entries that pass the level gate.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .context import LogContext
    from .levels import Level

Fields = dict[str, Any]
LazyProducer = Callable[[], Mapping[str, Any]]
ContextualProducer = Callable[["LogContext", "Level", Fields, tuple[Any, ...]], Mapping[str, Any]]


@dataclass(frozen=True, slots=True)
class StaticFields:
    """Fixed fields attached to every emitted entry.

    Examples
    --------
    >>> StaticFields({"planet": "Venus"}).resolve(None, None, {}, ())
    {'planet': 'Venus'}
    """

    fields: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))

    def resolve(self, ctx: LogContext, level: Level, fields: Fields, args: tuple[Any, ...]) -> Mapping[str, Any]:
        return self.fields


@dataclass(frozen=True, slots=True)
class LazyFields:
    """Fields produced fresh by a zero-argument callable on each emitted entry."""

    producer: LazyProducer

    def resolve(self, ctx: LogContext, level: Level, fields: Fields, args: tuple[Any, ...]) -> Mapping[str, Any]:
        return self.producer()


@dataclass(frozen=True, slots=True)
class ContextualFields:
    """Fields derived from the call itself.

    The producer is invoked as ``producer(ctx, level, fields, args)`` where
    ``fields`` is the mutable mapping of explicit fields for this entry. Keys
    it deletes do not reach the appender.

    Examples
    --------
    >>> def scale(ctx, level, fields, args):
    ...     return {"area": fields.pop("size") ** 2}
    >>> explicit = {"size": 3}
    >>> ContextualFields(scale).resolve(None, None, explicit, ())
    {'area': 9}
    >>> explicit
    {}
    """

    producer: ContextualProducer

    def resolve(self, ctx: LogContext, level: Level, fields: Fields, args: tuple[Any, ...]) -> Mapping[str, Any]:
        return self.producer(ctx, level, fields, args)


FieldSource = Union[StaticFields, LazyFields, ContextualFields]


def as_field_source(source: object) -> FieldSource:
    """Coerce *source* into one of the :data:`FieldSource` variants.

    Why
    ----
    Callers attach plain dictionaries or functions; the arity of a function is
    checked here, at construction time, so dispatch never sees a producer it
    cannot call.

    What
    ----
    Variants pass through unchanged. Mappings become :class:`StaticFields`.
    Callables accepting four positional arguments become
    :class:`ContextualFields`; callables accepting none become
    :class:`LazyFields`.

    Raises
    ------
    TypeError
        For any other object, or a callable with an unsupported signature.

    Examples
    --------
    >>> as_field_source({"a": 1})
    StaticFields(fields={'a': 1})
    >>> type(as_field_source(lambda: {"a": 1})).__name__
    'LazyFields'
    >>> type(as_field_source(lambda ctx, level, fields, args: {})).__name__
    'ContextualFields'
    >>> as_field_source(lambda only: {})
    Traceback (most recent call last):
    ...
    TypeError: field source callable must accept either no arguments or (ctx, level, fields, args)
    """

    if isinstance(source, (StaticFields, LazyFields, ContextualFields)):
        return source
    if isinstance(source, Mapping):
        return StaticFields(source)
    if callable(source):
        if _accepts(source, 4):
            return ContextualFields(source)
        if _accepts(source, 0):
            return LazyFields(source)
        raise TypeError("field source callable must accept either no arguments or (ctx, level, fields, args)")
    raise TypeError(f"unsupported field source type: {type(source).__name__}")


def _accepts(func: Callable[..., Any], count: int) -> bool:
    """Return ``True`` when *func* can be called with *count* positional arguments."""

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(*range(count))
    except TypeError:
        return False
    return True
