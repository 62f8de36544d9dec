# topmark:header:start
#
#   project      : LineCat
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LineCat test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `linecat.config.MutableConfig`, then `freeze()` them into a
    `linecat.config.RunConfig` before handing them to the engine.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from linecat.config import MutableConfig
from linecat.config import logging as linecat_logging
from linecat.constants import ENV_LOG_LEVEL, ENV_NO_COLOR

if TYPE_CHECKING:
    from pathlib import Path

    from linecat.config import RunConfig

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_linecat_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LineCat's runtime log level and color are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_NO_COLOR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured during test execution."""
    linecat_logging.setup_logging(level=linecat_logging.TRACE_LEVEL)


@pytest.fixture
def write_bytes(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes ``data`` to ``tmp_path / name`` and returns the path."""

    def _write(name: str, data: bytes) -> Path:
        path: Path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


def make_config(**overrides: Any) -> RunConfig:
    """Return a frozen `RunConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder before freezing.

    Returns:
        RunConfig: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, list(v) if k == "sources" else v)
    return m.freeze()
