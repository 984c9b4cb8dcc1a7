"""Severity levels and their textual representation.

Purpose
-------
Define the ordered :class:`Level` enumeration used to gate every log call, and
the case-insensitive parser used by configuration and the CLI.

Contents
--------
* :class:`Level` – ``IntEnum`` ordered from most (``PANIC``) to least
  (``DEBUG``) severe.
* :func:`parse_level` – text to :class:`Level`, raising :class:`InvalidLevel`.

System Role
-----------
The dispatch engine compares levels numerically: an entry is emitted when
``entry_level <= threshold``. Lower values are rarer and more severe.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Final

from .errors import InvalidLevel


class Level(IntEnum):
    """Ordered log severity.

    Examples
    --------
    >>> Level.ERROR < Level.INFO
    True
    >>> str(Level.WARN)
    'WARN'
    """

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5

    def __str__(self) -> str:
        return self.name

    def __format__(self, spec: str) -> str:
        return format(self.name, spec)

    def to_logging(self) -> int:
        """Return the closest :mod:`logging` level number.

        Examples
        --------
        >>> Level.PANIC.to_logging() == logging.CRITICAL
        True
        """

        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS: Final[dict[Level, int]] = {
    Level.PANIC: logging.CRITICAL,
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
}

_ALIASES: Final[dict[str, Level]] = {
    "panic": Level.PANIC,
    "fatal": Level.FATAL,
    "error": Level.ERROR,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "info": Level.INFO,
    "debug": Level.DEBUG,
}


def parse_level(text: str) -> Level:
    """Parse *text* into a :class:`Level`.

    Why
    ----
    Levels arrive as strings from environment variables and command lines.

    What
    ----
    Case-insensitive lookup; ``warn`` and ``warning`` are synonyms.

    Raises
    ------
    InvalidLevel
        When *text* names no known level.

    Examples
    --------
    >>> parse_level("Warning")
    <Level.WARN: 3>
    >>> parse_level("loud")
    Traceback (most recent call last):
    ...
    lib_context_log.domain.errors.InvalidLevel: invalid level: loud
    """

    try:
        return _ALIASES[str(text).lower()]
    except KeyError as exc:
        raise InvalidLevel(text) from exc
