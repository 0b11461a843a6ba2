# topmark:header:start
#
#   project      : ReadMark
#   file         : __init__.py
#   file_relpath : src/readmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark configuration: layered settings, TOML loading and logging setup."""

from __future__ import annotations

from readmark.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
