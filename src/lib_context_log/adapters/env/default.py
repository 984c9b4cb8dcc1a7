"""Environment variable adapter.

Purpose
-------
Read the facade's process-wide settings from environment variables so hosts
can raise verbosity or enable append tracing without code changes.

Key behaviours
--------------
* Enforces a prefix (``default_env_prefix``) so only relevant keys are
  captured; ``LIB_CONTEXT_LOG_LEVEL`` becomes ``{"level": ...}``.
* Performs light type coercion for common scalar types (bools, ints, floats,
  ``null``/``none``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

ENV_PREFIX: Final[str] = "LIB_CONTEXT_LOG"


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('lib-context-log')
    'LIB_CONTEXT_LOG'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the facade's namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str = ENV_PREFIX) -> dict[str, object]:
        """Return coerced settings whose variable names start with *prefix*.

        Keys are lower-cased with the prefix stripped.

        Examples
        --------
        >>> env = {'LIB_CONTEXT_LOG_LEVEL': 'debug', 'LIB_CONTEXT_LOG_DEBUG': 'true', 'HOME': '/root'}
        >>> DefaultEnvLoader(environ=env).load()
        {'level': 'debug', 'debug': True}
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, object] = {}
        for key, value in self._environ.items():
            if prefix and not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :] if prefix else key
            if not stripped:
                continue
            collected[stripped.lower()] = _coerce(value)
        return collected


def _coerce(value: str) -> object:
    """Coerce textual environment values to Python primitives where possible.

    Examples
    --------
    >>> _coerce('true'), _coerce('10'), _coerce('3.5'), _coerce('hello')
    (True, 10, 3.5, 'hello')
    """

    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    try:
        if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
            return int(value)
        float_value = float(value)
        return float_value
    except ValueError:
        return value
