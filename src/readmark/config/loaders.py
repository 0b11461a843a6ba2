# topmark:header:start
#
#   project      : ReadMark
#   file         : loaders.py
#   file_relpath : src/readmark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from readmark.config.logging import get_logger
from readmark.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from readmark.config.logging import ReadmarkLogger

TomlTable = dict[str, Any]

logger: ReadmarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8 or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Could not read '{path}': {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        raise ConfigError(f"Cannot decode '{path}' as UTF-8: {e.reason}", encoding=True) from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in '{path}': {e}") from e
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def get_table(data: TomlTable, section: Sequence[str]) -> TomlTable:
    """Return the nested table at ``section`` (e.g. ``("package", "metadata")``).

    Missing or non-table entries yield an empty dict.
    """
    node: Any = data
    for key in section:
        if not isinstance(node, dict):
            return {}
        node = node.get(key)
    return node if isinstance(node, dict) else {}
