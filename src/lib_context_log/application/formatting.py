"""Turn loosely typed log arguments into one message string.

Purpose
-------
Support both calling styles in use: printf-style templates
(``info(ctx, "Hello %s", "Bob")``) and print-style argument lists
(``infoln("Hello", "Bob")``).

Contents
    - ``format_message``: the public formatter.
    - ``render``: string form of a single argument.

System Role
-----------
Called by the dispatch engine after the level gate and field resolution. The
formatter never raises for ordinary input; a template that does not match its
arguments degrades to print-style output.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..observability import log_debug


def format_message(args: Sequence[Any], *, templated: bool = True) -> str:
    """Build the display message for *args*.

    What
    ----
    * no arguments: ``""``;
    * one argument: its rendering (see :func:`render`);
    * a ``str`` first argument followed by more arguments, with *templated*
      left on: ``%``-substitution of the trailing arguments;
    * anything else: the renderings of all arguments joined by single spaces.

    Examples
    --------
    >>> format_message(["Hello %s", "Bob"])
    'Hello Bob'
    >>> format_message(["Hello", "Bob"], templated=False)
    'Hello Bob'
    >>> format_message(["Goodbye %d", 3])
    'Goodbye 3'
    >>> format_message([ValueError("boom"), 42])
    'boom 42'
    >>> format_message([])
    ''
    """

    if not args:
        return ""
    first = args[0]
    is_template = isinstance(first, str)
    msg = render(first)
    if len(args) == 1:
        return msg
    rest = tuple(args[1:])
    if is_template and templated:
        try:
            return msg % rest
        except (TypeError, ValueError) as exc:
            log_debug("template_mismatch", template=msg, arguments=len(rest), error=str(exc))
    return " ".join([msg, *(render(arg) for arg in rest)])


def render(value: Any) -> str:
    """Return the string form of one log argument.

    The checks run in a fixed order: text, then exceptions, then objects that
    define their own ``__str__``, then the default conversion.

    Examples
    --------
    >>> render("text"), render(KeyError("k")), render(3)
    ('text', "'k'", '3')
    """

    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        return str(value)
    if type(value).__str__ is not object.__str__:
        return str(value)
    return repr(value)
