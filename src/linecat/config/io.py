# topmark:header:start
#
#   project      : LineCat
#   file         : io.py
#   file_relpath : src/linecat/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading LineCat configuration from:
- the runtime defaults defined in code, and
- an on-disk TOML file (``linecat.toml`` or ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
value getters record **warnings** for ill-typed values so user mistakes are
surfaced without changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linecat.config.keys import Toml
from linecat.config.logging import get_logger
from linecat.constants import DEFAULT_BUFFER_SIZE, DEFAULT_NUMBER_WIDTH

if TYPE_CHECKING:
    from pathlib import Path

    from linecat.config.logging import LinecatLogger

TomlTable = dict[str, Any]

logger: LinecatLogger = get_logger(__name__)


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be read, parsed or validated."""


def load_defaults_dict() -> TomlTable:
    """Return LineCat's **runtime defaults** as a Python dict.

    This function intentionally performs no I/O. The returned value is a new
    dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_OUTPUT: {
            Toml.KEY_NUMBER: False,
            Toml.KEY_SHOW_ENDS: False,
            Toml.KEY_NUMBER_WIDTH: DEFAULT_NUMBER_WIDTH,
        },
        Toml.SECTION_INPUT: {
            Toml.KEY_BUFFER_SIZE: DEFAULT_BUFFER_SIZE,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    A ``pyproject.toml`` is unwrapped to its ``[tool.linecat]`` table; any
    other file is used as is.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed (and, for ``pyproject.toml``, unwrapped) content.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigLoadError(f"cannot read config file {path}: {e.strerror or e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(f"invalid TOML in config file {path}: {e}") from e

    data_any: Any = doc.unwrap()
    data: TomlTable = cast("TomlTable", data_any) if isinstance(data_any, dict) else {}

    if path.name == "pyproject.toml":
        tool: Any = data.get(Toml.SECTION_TOOL, {})
        nested: Any = tool.get(Toml.SECTION_TOOL_LINECAT, {}) if isinstance(tool, dict) else {}
        if not isinstance(nested, dict):
            raise ConfigLoadError(f"[tool.linecat] in {path} is not a table")
        data = cast("TomlTable", nested)
        logger.debug("Using [tool.linecat] from %s", path)

    return data


def get_table_value(table: TomlTable, key: str, warnings: list[str]) -> TomlTable:
    """Return a sub-table, or an empty dict when missing or not a table.

    Args:
        table (TomlTable): Table to query.
        key (str): Name of the sub-table.
        warnings (list[str]): Collector for user-facing warnings.

    Returns:
        TomlTable: The sub-table (possibly empty).
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    msg = f"[{key}] must be a table, ignoring value {value!r}"
    logger.warning(msg)
    warnings.append(msg)
    return {}


def get_bool_value_or_none(
    table: TomlTable,
    key: str,
    warnings: list[str],
    *,
    where: str,
) -> bool | None:
    """Extract an optional boolean; ill-typed values are reported and ignored."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    msg = f"[{where}].{key} must be a boolean, ignoring value {value!r}"
    logger.warning(msg)
    warnings.append(msg)
    return None


def get_positive_int_value_or_none(
    table: TomlTable,
    key: str,
    warnings: list[str],
    *,
    where: str,
) -> int | None:
    """Extract an optional positive integer.

    Non-integer values are reported as warnings and ignored; integers below 1
    are rejected.

    Raises:
        ConfigLoadError: If the value is an integer smaller than 1.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"[{where}].{key} must be an integer, ignoring value {value!r}"
        logger.warning(msg)
        warnings.append(msg)
        return None
    if value < 1:
        raise ConfigLoadError(f"[{where}].{key} must be at least 1, got {value}")
    return value
