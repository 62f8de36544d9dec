# topmark:header:start
#
#   project      : LineCat
#   file         : __init__.py
#   file_relpath : src/linecat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineCat configuration: runtime model, TOML loading and logging setup."""

from __future__ import annotations

from linecat.config.io import ConfigLoadError
from linecat.config.model import MutableConfig, RunConfig, build_run_config

__all__ = [
    "ConfigLoadError",
    "MutableConfig",
    "RunConfig",
    "build_run_config",
]
