"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the dispatch engine, the adapters,
and consuming applications. The hierarchy lives in the domain layer so outer
layers may depend on it without creating import cycles.

Contents
--------
* :class:`LogError` – umbrella base class for every failure raised by
  ``lib_context_log``.
* :class:`InvalidLevel` – level text could not be parsed.
* :class:`MissingAppender` – a qualifying entry had nowhere to go.
* :class:`PanicError` – raised after a ``PANIC`` entry has been appended.

System Role
-----------
``InvalidLevel`` is the only recoverable member. ``MissingAppender`` and
``PanicError`` are meant to travel up the stack untouched: the library never
catches them itself. ``FATAL`` entries end the process with
``SystemExit(1)`` instead of a custom type.
"""

from __future__ import annotations


class LogError(Exception):
    """Base type for all exceptions emitted by ``lib_context_log``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidLevel(LogError, ValueError):
    """Raised when a textual level does not name any known severity.

    Why
    ----
    Parsing user input (environment variables, CLI options) is the one place
    where a bad value is expected and should be reported, not crash.

    Examples
    --------
    >>> err = InvalidLevel("loud")
    >>> str(err)
    'invalid level: loud'
    >>> isinstance(err, ValueError)
    True
    """

    def __init__(self, text: object) -> None:
        super().__init__(f"invalid level: {text}")
        self.text = text


class MissingAppender(LogError):
    """Raised when dispatch cannot resolve any appender for an emitted entry.

    Why
    ----
    Silently dropping log entries because nothing was configured hides real
    data. The dispatch engine raises this before any field source or
    formatter runs, so there are no partial side effects.
    """

    def __init__(self, message: str = "no appender attached to the context and no default appender configured") -> None:
        super().__init__(message)


class PanicError(LogError):
    """Raised once a ``PANIC`` entry has been handed to its appender.

    The formatted message is available as :attr:`message` (and as
    ``args[0]``) so recovery code can inspect what was logged.

    Examples
    --------
    >>> err = PanicError("Hello Bob")
    >>> err.message
    'Hello Bob'
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
