"""Application-layer field merge policy.

Purpose
-------
Combine the explicit fields of an entry with the fields contributed by the
context's field source into the single mapping handed to the appender.

Contents
    - ``resolve_fields``: invoke the field source and merge its output.
    - ``merge_fields``: the overwrite rule on its own.

System Role
-----------
Called by :func:`lib_context_log.application.dispatch.dispatch` only after an
entry has passed the level gate, so field-source side effects never happen for
filtered entries.

Precedence
----------
Context-sourced fields overwrite explicit fields of the same name. The rule is
kept for compatibility with existing callers even though the reverse would be
the more common choice for a structured logger.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..domain.fields import FieldSource

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..domain.context import LogContext
    from ..domain.levels import Level


def resolve_fields(
    explicit: Mapping[str, Any],
    source: FieldSource | None,
    ctx: LogContext,
    level: Level,
    args: tuple[Any, ...],
) -> Mapping[str, Any]:
    """Return the fields for one emitted entry.

    Why
    ----
    All three field-source shapes collapse into one call here so the dispatch
    engine does not branch on them.

    What
    ----
    Without a source, *explicit* is returned as is. Otherwise the source is
    resolved (a contextual source receives *explicit* itself and may delete
    keys from it) and its output is merged with :func:`merge_fields`.

    Side Effects
    ------------
    A contextual source may delete keys from *explicit*, so callers hand it a
    mapping they own. The merge itself never modifies either side.

    Examples
    --------
    >>> from lib_context_log.domain.fields import StaticFields
    >>> resolve_fields({"a": 1}, StaticFields({"a": 2, "b": 3}), None, None, ())
    {'a': 2, 'b': 3}
    >>> resolve_fields({"a": 1}, None, None, None, ())
    {'a': 1}
    """

    if source is None:
        return explicit
    produced = source.resolve(ctx, level, explicit, args)
    return merge_fields(explicit, produced)


def merge_fields(explicit: Mapping[str, Any], produced: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Overlay *produced* onto *explicit*, returning whichever side carries data.

    No mapping is allocated when either side is empty: an empty *produced*
    returns *explicit*, an empty *explicit* returns *produced* itself. When
    both carry data a new mapping is built and neither side is modified.

    Examples
    --------
    >>> merge_fields({"a": 1}, {})
    {'a': 1}
    >>> produced = {"b": 2}
    >>> merge_fields({}, produced) is produced
    True
    >>> merge_fields({"a": 1, "b": 1}, {"b": 2})
    {'a': 1, 'b': 2}
    """

    if not produced:
        return explicit
    if not explicit:
        return produced
    merged = dict(explicit)
    merged.update(produced)
    return merged
