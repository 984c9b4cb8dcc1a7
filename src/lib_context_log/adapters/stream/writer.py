"""Text-stream appender.

Purpose
-------
Write each entry as one human-readable line to any text stream, which is the
simplest useful backend and the one the CLI uses.

Line format
-----------
``[LEVEL] message`` when the entry has no fields, otherwise
``[LEVEL] message {fields}`` with the fields sorted by key.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Mapping

from ...domain.context import LogContext
from ...domain.levels import Level


class StreamAppender:
    """Appender writing one line per entry to a text stream.

    Parameters
    ----------
    stream:
        Destination. Defaults to whatever :data:`sys.stdout` is at write time,
        so redirection after construction is honoured.

    Examples
    --------
    >>> import io
    >>> buf = io.StringIO()
    >>> appender = StreamAppender(buf)
    >>> appender.append(None, Level.ERROR, {}, "Hello Bob")
    >>> appender.append(None, Level.INFO, {"size": 2, "city": "Austin"}, "Hello Alice")
    >>> print(buf.getvalue(), end="")
    [ERROR] Hello Bob
    [INFO] Hello Alice {'city': 'Austin', 'size': 2}
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def append(self, ctx: LogContext, level: Level, fields: Mapping[str, Any], msg: str) -> None:
        self.stream.write(format_line(level, fields, msg))


def format_line(level: Level, fields: Mapping[str, Any] | None, msg: str) -> str:
    """Return the line :class:`StreamAppender` writes for one entry.

    Examples
    --------
    >>> format_line(Level.DEBUG, None, "Goodbye 3")
    '[DEBUG] Goodbye 3\\n'
    """

    if not fields:
        return f"[{level}] {msg}\n"
    ordered = dict(sorted(fields.items()))
    return f"[{level}] {msg} {ordered}\n"
