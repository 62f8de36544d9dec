# topmark:header:start
#
#   project      : LineCat
#   file         : main.py
#   file_relpath : src/linecat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click front-end for LineCat.

The command is a thin layer over the stream engine:
- resolve flags, an optional TOML config file and FILE arguments into a `RunConfig`;
- run the engine over Click's binary stdin/stdout streams;
- print one diagnostic per failed source and map the outcome to an exit code.

Invocation errors (unknown options, bad option values) exit with
`ExitCode.USAGE_ERROR`; anything the run does not anticipate is reported once
and exits with `ExitCode.UNEXPECTED_ERROR`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING

import click

from linecat.cli.console import ClickConsole
from linecat.cli.errors import (
    LinecatConfigError,
    LinecatIOError,
    LinecatUnexpectedError,
    LinecatUsageError,
)
from linecat.cli.exit_codes import ExitCode
from linecat.cli.keys import ArgKey, CliOpt, CliShortOpt
from linecat.config.io import ConfigLoadError
from linecat.config.logging import get_logger, resolve_env_log_level, setup_logging
from linecat.config.model import build_run_config
from linecat.constants import ENV_NO_COLOR, LINECAT_VERSION, PROG_NAME
from linecat.pipeline.engine import process
from linecat.pipeline.errors import SinkWriteError
from linecat.pipeline.sink import BufferedSink

if TYPE_CHECKING:
    from linecat.cli.console_api import ConsoleLike
    from linecat.config.logging import LinecatLogger
    from linecat.config.model import RunConfig
    from linecat.pipeline.outcomes import RunOutcome, SourceFailure

logger: LinecatLogger = get_logger(__name__)

HELP: str = """Concatenate FILE(s) to standard output.

With no FILE, or when FILE is -, read standard input.
"""


def init_common_state(ctx: click.Context, *, no_color: bool) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    enable_color: bool = not (no_color or os.environ.get(ENV_NO_COLOR))
    ctx.obj["color_enabled"] = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env, color=enable_color and sys.stderr.isatty())


class LinecatCommand(click.Command):
    """Click command reporting invocation errors with ``ExitCode.USAGE_ERROR``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except LinecatUsageError:
            raise
        except click.UsageError as exc:
            raise LinecatUsageError(exc.format_message(), ctx=exc.ctx or ctx) from exc


def output_stream() -> IO[bytes]:
    """Return the binary stream the concatenated output is written to."""
    return click.get_binary_stream("stdout")


def input_stream() -> IO[bytes]:
    """Return the binary stream bound to ``-`` and to an empty FILE list."""
    return click.get_binary_stream("stdin")


def detach_stdout() -> None:
    """Point the process's stdout descriptor at the null device.

    Called after output failed (typically ``EPIPE``): bytes still buffered in
    ``sys.stdout`` would otherwise fail again when the interpreter flushes it
    at exit.
    """
    try:
        fd: int = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        # In-memory replacement (e.g. under a test runner); nothing to detach.
        return
    devnull: int = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


@click.command(
    name=PROG_NAME,
    cls=LinecatCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=HELP,
)
@click.option(
    CliShortOpt.NUMBER,
    CliOpt.NUMBER,
    ArgKey.NUMBER_LINES,
    is_flag=True,
    help="Number all output lines.",
)
@click.option(
    CliShortOpt.SHOW_ENDS,
    CliOpt.SHOW_ENDS,
    ArgKey.SHOW_ENDS,
    is_flag=True,
    help="Display $ at the end of each line.",
)
@click.option(
    CliOpt.CONFIG,
    ArgKey.CONFIG_PATH,
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read default settings from this TOML file (linecat.toml or pyproject.toml).",
)
@click.option(
    CliOpt.NO_COLOR,
    ArgKey.NO_COLOR,
    is_flag=True,
    help="Disable colored diagnostics.",
)
@click.version_option(LINECAT_VERSION, CliOpt.VERSION, prog_name=PROG_NAME)
@click.argument(ArgKey.FILES, nargs=-1, type=str)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    number_lines: bool,
    show_ends: bool,
    config_path: Path | None,
    no_color: bool,
) -> None:
    """Entry point for the LineCat CLI."""
    init_common_state(ctx, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    try:
        config, warnings = build_run_config(
            files,
            number_lines=number_lines,
            show_ends=show_ends,
            config_path=config_path,
        )
    except ConfigLoadError as exc:
        raise LinecatConfigError(str(exc)) from exc
    for warning in warnings:
        console.warn(f"{PROG_NAME}: config: {warning}")

    try:
        outcome: RunOutcome = run(config, console)
    except click.ClickException:
        raise
    except Exception as exc:
        logger.exception("Unexpected error while processing sources")
        raise LinecatUnexpectedError(f"unexpected error: {exc}") from exc
    ctx.exit(ExitCode.SUCCESS if outcome.ok else ExitCode.FAILURE)


def run(config: RunConfig, console: ConsoleLike) -> RunOutcome:
    """Run the engine over Click's binary standard streams.

    Args:
        config (RunConfig): Resolved configuration.
        console (ConsoleLike): Console receiving per-source diagnostics.

    Returns:
        RunOutcome: The run outcome.

    Raises:
        LinecatIOError: If standard output cannot be written.
    """

    def report(failure: SourceFailure) -> None:
        console.error(f"{PROG_NAME}: {failure.source.display_name}: {failure.reason}")

    sink = BufferedSink(output_stream(), config.buffer_size)
    try:
        return process(
            config,
            sink,
            stdin=input_stream(),
            on_failure=report,
        )
    except SinkWriteError as exc:
        logger.error("Aborting run: %s", exc)
        detach_stdout()
        raise LinecatIOError(str(exc)) from exc


if __name__ == "__main__":
    cli()
