# topmark:header:start
#
#   project      : LineCat
#   file         : logging.py
#   file_relpath : src/linecat/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for LineCat: a TRACE level, per-module loggers and a stderr handler.

Standard output carries the concatenated data, so log records always go to
``sys.stderr``, prefixed with the program name like every other diagnostic.
Logging is silent (``CRITICAL``) unless ``LINECAT_LOG_LEVEL`` asks for more.
Colors follow the same switch as the CLI diagnostics (``--no-color`` and
``NO_COLOR``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from linecat.constants import ENV_LOG_LEVEL, PROG_NAME

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class LinecatLogger(logging.Logger):
    """Logger with a ``trace()`` method for per-chunk and per-handle events."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE' (below DEBUG)."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(LinecatLogger)


LOG_FORMAT: Final[str] = f"{PROG_NAME}: [%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = f"{PROG_NAME}: [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; a record takes the style of the first threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with yachalk.

    Args:
        fmt (str | None): Format string, as for `logging.Formatter`.
        color (bool): If False, records are returned without ANSI codes.
    """

    def __init__(self, fmt: str | None = None, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``LINECAT_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names in any case ("trace", "DEBUG") and numeric values ("10").
    """
    val: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not val:
        return None
    if val.isdigit():
        return int(val)
    return _NAME_TO_LEVEL.get(val)


def setup_logging(level: int | None = None, *, color: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level (int | None): Root level; ``None`` consults ``LINECAT_LOG_LEVEL``
            and defaults to ``CRITICAL``.
        color (bool): Whether records are colored.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt, color=color))
    root_logger.addHandler(handler)


def get_logger(name: str) -> LinecatLogger:
    """Return the `LinecatLogger` registered under ``name``."""
    return cast("LinecatLogger", logging.getLogger(name))
