"""CLI adapter for ``lib_context_log`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators try the facade from a shell: inspect levels, check how a level
string parses, and emit entries through the stream appender exactly as
application code would.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_levels` – lists levels from most to least severe.
* :func:`cli_parse_level` – prints the canonical name of a level string.
* :func:`cli_emit` – dispatches one entry to standard output.
* :func:`cli_fail` – triggers a deterministic ``PANIC``.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It builds a :class:`LogContext` and calls
the composition root; ``lib_cli_exit_tools`` turns ``SystemExit`` from
``FATAL`` entries and uncaught errors into consistent exit codes.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.stream.writer import StreamAppender
from .application.dispatch import dispatch
from .domain.context import LogContext
from .domain.errors import InvalidLevel
from .domain.levels import Level, parse_level
from .testing import i_should_fail

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

LEVEL_CHOICES: Final[tuple[str, ...]] = ("panic", "fatal", "error", "warn", "warning", "info", "debug")


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when metadata is unavailable."""

    try:
        return metadata.version("lib_context_log")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Context-aware logging facade",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_context_log",
    message="lib_context_log version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_context_log")
    except metadata.PackageNotFoundError:
        click.echo("lib_context_log (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_context_log')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_levels() -> None:
    """List levels from most to least severe.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> CliRunner().invoke(cli, ["levels"]).output.split()
    ['PANIC', 'FATAL', 'ERROR', 'WARN', 'INFO', 'DEBUG']
    """

    for level in Level:
        click.echo(str(level))


@cli.command("parse-level", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
def cli_parse_level(text: str) -> None:
    """Print the canonical name of TEXT, failing on unknown levels."""

    try:
        level = parse_level(text)
    except InvalidLevel as exc:
        raise click.BadParameter(str(exc), param_hint="TEXT") from exc
    click.echo(str(level))


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.argument("args", nargs=-1)
@click.option(
    "--level",
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    default="info",
    show_default=True,
    help="Level of the emitted entry",
)
@click.option(
    "--threshold",
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    default="debug",
    show_default=True,
    help="Least severe level the context lets through",
)
@click.option(
    "--field",
    "field_pairs",
    multiple=True,
    help="Structured field as KEY=VALUE (repeatable)",
)
@click.option(
    "--println/--printf",
    default=False,
    help="Join arguments with spaces instead of substituting them into MESSAGE",
)
def cli_emit(
    message: str,
    args: Sequence[str],
    level: str,
    threshold: str,
    field_pairs: Sequence[str],
    println: bool,
) -> None:
    """Emit MESSAGE (with ARGS) to standard output through the stream appender.

    ``fatal`` exits with status 1 after writing; ``panic`` writes, then fails.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["emit", "--level", "warn", "Hello %s", "Bob"])
    >>> result.output
    '[WARN] Hello Bob\\n'
    """

    ctx = LogContext(level=parse_level(threshold), appender=StreamAppender())
    dispatch(ctx, parse_level(level), _parse_fields(field_pairs), message, *args, templated=not println)


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger a deterministic PANIC for testing traceback handling."""

    i_should_fail()


def _parse_fields(pairs: Sequence[str]) -> dict[str, str]:
    """Split ``KEY=VALUE`` pairs, rejecting entries without ``=``.

    Examples
    --------
    >>> _parse_fields(["city=Austin", "note=a=b"])
    {'city': 'Austin', 'note': 'a=b'}
    """

    fields: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--field")
        fields[key] = value
    return fields


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_context_log",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
