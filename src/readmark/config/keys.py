# topmark:header:start
#
#   project      : ReadMark
#   file         : keys.py
#   file_relpath : src/readmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for ReadMark configuration.

Keys are read from ``readmark.toml`` in the project root and from the
``[package.metadata.readmark]`` table of ``Cargo.toml``. Renaming or removing
a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys of the ReadMark configuration table."""

    KEY_TEMPLATE: Final[str] = "template"
    KEY_NO_TEMPLATE: Final[str] = "no-template"
    KEY_TITLE: Final[str] = "title"
    KEY_LICENSE: Final[str] = "license"
    KEY_INDENT_HEADINGS: Final[str] = "indent-headings"
    KEY_OUTPUT: Final[str] = "output"

    STRING_KEYS: Final[frozenset[str]] = frozenset({KEY_TEMPLATE, KEY_OUTPUT})
    BOOL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_NO_TEMPLATE, KEY_TITLE, KEY_LICENSE, KEY_INDENT_HEADINGS}
    )
    ALL_KEYS: Final[frozenset[str]] = STRING_KEYS | BOOL_KEYS
