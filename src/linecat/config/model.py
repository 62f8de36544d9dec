# topmark:header:start
#
#   project      : LineCat
#   file         : model.py
#   file_relpath : src/linecat/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `RunConfig`: an immutable runtime snapshot consumed by the stream engine.
    - `MutableConfig`: a mutable builder used while layering defaults, a TOML
      config file and CLI overrides; it can be frozen into `RunConfig` and
      thawed back for edits.

Precedence (lowest to highest): runtime defaults, config file, CLI flags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from linecat.config.io import (
    ConfigLoadError,
    get_bool_value_or_none,
    get_positive_int_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from linecat.config.keys import Toml
from linecat.config.logging import get_logger
from linecat.constants import DEFAULT_BUFFER_SIZE, DEFAULT_NUMBER_WIDTH
from linecat.pipeline.sources import resolve_sources

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from linecat.config.io import TomlTable
    from linecat.config.logging import LinecatLogger
    from linecat.pipeline.sources import SourceId

logger: LinecatLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable configuration for one run.

    Attributes:
        number_lines (bool): Prefix every output line with a running 1-based number,
            shared across all sources.
        show_ends (bool): Append ``$`` to every output line, before its terminator.
        sources (tuple[SourceId, ...]): Sources in processing order. Empty means
            standard input.
        buffer_size (int): Maximum bytes per read, and output batching threshold.
        number_width (int): Minimum width of the right-aligned number column.
    """

    number_lines: bool = False
    show_ends: bool = False
    sources: tuple[SourceId, ...] = ()
    buffer_size: int = DEFAULT_BUFFER_SIZE
    number_width: int = DEFAULT_NUMBER_WIDTH

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            number_lines=self.number_lines,
            show_ends=self.show_ends,
            sources=list(self.sources),
            buffer_size=self.buffer_size,
            number_width=self.number_width,
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Attributes:
        number_lines (bool): See `RunConfig.number_lines`.
        show_ends (bool): See `RunConfig.show_ends`.
        sources (list[SourceId]): See `RunConfig.sources`.
        buffer_size (int): See `RunConfig.buffer_size`.
        number_width (int): See `RunConfig.number_width`.
        config_files (list[Path]): Config files merged into this builder.
        warnings (list[str]): Non-fatal problems found while loading config files.
    """

    number_lines: bool = False
    show_ends: bool = False
    sources: list[SourceId] = field(default_factory=lambda: [])
    buffer_size: int = DEFAULT_BUFFER_SIZE
    number_width: int = DEFAULT_NUMBER_WIDTH

    config_files: list[Path] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated from the runtime defaults."""
        draft = cls()
        draft.apply_toml(load_defaults_dict())
        return draft

    def apply_toml(self, data: TomlTable) -> MutableConfig:
        """Merge values from a parsed TOML table into this builder.

        Missing keys leave the current value untouched.

        Raises:
            ConfigLoadError: If a value is out of range.
        """
        output: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT, self.warnings)
        number: bool | None = get_bool_value_or_none(
            output, Toml.KEY_NUMBER, self.warnings, where=Toml.SECTION_OUTPUT
        )
        if number is not None:
            self.number_lines = number
        show_ends: bool | None = get_bool_value_or_none(
            output, Toml.KEY_SHOW_ENDS, self.warnings, where=Toml.SECTION_OUTPUT
        )
        if show_ends is not None:
            self.show_ends = show_ends
        width: int | None = get_positive_int_value_or_none(
            output, Toml.KEY_NUMBER_WIDTH, self.warnings, where=Toml.SECTION_OUTPUT
        )
        if width is not None:
            self.number_width = width

        inp: TomlTable = get_table_value(data, Toml.SECTION_INPUT, self.warnings)
        buffer_size: int | None = get_positive_int_value_or_none(
            inp, Toml.KEY_BUFFER_SIZE, self.warnings, where=Toml.SECTION_INPUT
        )
        if buffer_size is not None:
            self.buffer_size = buffer_size
        return self

    def load_file(self, path: Path) -> MutableConfig:
        """Merge a TOML config file into this builder.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        logger.info("Loading config file %s", path)
        self.apply_toml(load_toml_dict(path))
        self.config_files.append(path)
        return self

    def apply_cli(
        self,
        *,
        files: Iterable[str],
        number_lines: bool = False,
        show_ends: bool = False,
    ) -> MutableConfig:
        """Apply command-line arguments; flags can only switch features on."""
        self.sources = list(resolve_sources(files))
        self.number_lines = self.number_lines or number_lines
        self.show_ends = self.show_ends or show_ends
        return self

    def freeze(self) -> RunConfig:
        """Freeze this builder into an immutable `RunConfig`.

        Raises:
            ConfigLoadError: If a numeric setting was set below 1 programmatically.
        """
        if self.buffer_size < 1 or self.number_width < 1:
            raise ConfigLoadError(
                f"buffer size and number width must be at least 1 "
                f"(got {self.buffer_size} and {self.number_width})"
            )
        return RunConfig(
            number_lines=self.number_lines,
            show_ends=self.show_ends,
            sources=tuple(self.sources),
            buffer_size=self.buffer_size,
            number_width=self.number_width,
        )


def build_run_config(
    files: Iterable[str],
    *,
    number_lines: bool = False,
    show_ends: bool = False,
    config_path: Path | None = None,
) -> tuple[RunConfig, list[str]]:
    """Resolve defaults, an optional config file and CLI values into a `RunConfig`.

    Args:
        files (Iterable[str]): Raw source identifiers (``"-"`` is standard input).
        number_lines (bool): ``--number`` flag.
        show_ends (bool): ``--show-ends`` flag.
        config_path (Path | None): Optional TOML config file.

    Returns:
        tuple[RunConfig, list[str]]: The frozen config and any config warnings.

    Raises:
        ConfigLoadError: If the config file is unusable.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if config_path is not None:
        draft.load_file(config_path)
    draft.apply_cli(files=files, number_lines=number_lines, show_ends=show_ends)
    config: RunConfig = draft.freeze()
    logger.debug("Resolved config: %s", config)
    return config, list(draft.warnings)
