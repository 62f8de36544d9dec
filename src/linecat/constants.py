# topmark:header:start
#
#   project      : LineCat
#   file         : constants.py
#   file_relpath : src/linecat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineCat Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    LINECAT_VERSION: str = get_version("linecat")
except PackageNotFoundError:  # running from a source checkout
    LINECAT_VERSION = "0.0.0"

PROG_NAME: str = "linecat"

# Identifier that selects standard input instead of a file path.
STDIN_MARKER: str = "-"

LINE_TERMINATOR: bytes = b"\n"
END_MARKER: bytes = b"$"
NUMBER_SEPARATOR: bytes = b"\t"

DEFAULT_BUFFER_SIZE: int = 64 * 1024
DEFAULT_NUMBER_WIDTH: int = 6

ENV_LOG_LEVEL: str = "LINECAT_LOG_LEVEL"
ENV_NO_COLOR: str = "NO_COLOR"
