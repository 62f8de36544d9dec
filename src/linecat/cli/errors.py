# topmark:header:start
#
#   project      : LineCat
#   file         : errors.py
#   file_relpath : src/linecat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LineCat CLI.

Raise these exceptions in the command to end the run with a standardized
message and exit code. Messages are shown through the project console when one
is present in the Click context, otherwise with Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from linecat.cli.exit_codes import ExitCode
from linecat.constants import PROG_NAME


class LinecatError(click.ClickException):
    """Base class for all LineCat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, prefixed with the program name."""
        return f"{PROG_NAME}: {self.message}"

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class LinecatUsageError(LinecatError):
    """Error for command-line invocation errors (unknown options, bad values).

    The usage line and help hint are shown before the message, as Click does
    for its own usage errors.
    """

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, message: str, ctx: click.Context | None = None) -> None:
        super().__init__(message)
        self.ctx = ctx

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display usage, a help hint and the error message on stderr."""
        if self.ctx is not None:
            click.echo(self.ctx.get_usage(), err=True, color=self.ctx.color)
            hint: str = f"Try '{self.ctx.command_path} -h' for help."
            click.echo(hint, err=True, color=self.ctx.color)
        super().show(file)


class LinecatConfigError(LinecatError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LinecatIOError(LinecatError):
    """Error when the output stream cannot be written."""

    exit_code = ExitCode.IO_ERROR


class LinecatUnexpectedError(LinecatError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
