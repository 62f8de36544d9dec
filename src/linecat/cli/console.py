# topmark:header:start
#
#   project      : LineCat
#   file         : console.py
#   file_relpath : src/linecat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based console for user-facing diagnostics."""

from __future__ import annotations

from typing import TextIO

import click

from linecat.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Diagnostics console, independent from the logger.

    Args:
        enable_color (bool): If False, never emit ANSI color codes. If True, Click
            decides based on whether the stream is a terminal.
        err (TextIO | None): Stream for diagnostics. Defaults to Click's stderr.
    """

    def __init__(self, *, enable_color: bool = True, err: TextIO | None = None) -> None:
        self.enable_color = enable_color
        self.err = err

    def _color(self) -> bool | None:
        return None if self.enable_color else False

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, err=True, color=self._color(), fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, err=True, color=self._color(), fg="bright_red")
