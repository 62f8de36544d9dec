# topmark:header:start
#
#   project      : LineCat
#   file         : exit_codes.py
#   file_relpath : src/linecat/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the LineCat CLI.

``FAILURE`` follows the ``cat`` convention: at least one source could not be
read, although the readable ones were still written. The error values align
with the BSD `sysexits` convention so other tooling can interpret failures
consistently; ``UNEXPECTED_ERROR`` (255) is the last-resort bucket.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LineCat CLI.

    Attributes:
        SUCCESS: Every source was read and written.
        FAILURE: One or more sources could not be opened or read.
        USAGE_ERROR: Command-line invocation error (unknown option, bad
            option value). Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: Standard output could not be written. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
