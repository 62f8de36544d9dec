# topmark:header:start
#
#   project      : LineCat
#   file         : keys.py
#   file_relpath : src/linecat/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for LineCat configuration.

Keys defined here represent the *external configuration API* as it appears in
a ``linecat.toml`` file or in ``[tool.linecat]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change. CLI spellings live in
`linecat.cli.keys`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by LineCat configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_LINECAT: Final[str] = "linecat"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_NUMBER: Final[str] = "number"
    KEY_SHOW_ENDS: Final[str] = "show-ends"
    KEY_NUMBER_WIDTH: Final[str] = "number-width"

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_BUFFER_SIZE: Final[str] = "buffer-size"
