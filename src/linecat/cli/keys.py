# topmark:header:start
#
#   project      : LineCat
#   file         : keys.py
#   file_relpath : src/linecat/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI option spellings and argument keys for LineCat.

Option spellings (``CliOpt``) are user-facing; argument keys (``ArgKey``) are
the Click destination names consumed by the command body.
"""

from __future__ import annotations

from typing import Final


class CliOpt:
    """User-facing long option spellings (values include the leading ``--``)."""

    NUMBER: Final[str] = "--number"
    SHOW_ENDS: Final[str] = "--show-ends"
    CONFIG: Final[str] = "--config"
    NO_COLOR: Final[str] = "--no-color"
    VERSION: Final[str] = "--version"


class CliShortOpt:
    """Short option spellings."""

    NUMBER: Final[str] = "-n"
    SHOW_ENDS: Final[str] = "-E"


class ArgKey:
    """Click destination keys."""

    FILES: Final[str] = "files"
    NUMBER_LINES: Final[str] = "number_lines"
    SHOW_ENDS: Final[str] = "show_ends"
    CONFIG_PATH: Final[str] = "config_path"
    NO_COLOR: Final[str] = "no_color"
