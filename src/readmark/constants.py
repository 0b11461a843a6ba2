# topmark:header:start
#
#   project      : ReadMark
#   file         : constants.py
#   file_relpath : src/readmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

READMARK_VERSION: str = get_version("readmark")

CARGO_MANIFEST_NAME: str = "Cargo.toml"
DEFAULT_TEMPLATE_NAME: str = "README.tpl"
CONFIG_FILE_NAME: str = "readmark.toml"

# Table inside Cargo.toml holding ReadMark settings.
MANIFEST_METADATA_SECTION: tuple[str, ...] = ("package", "metadata", "readmark")

PLACEHOLDER_README: str = "{{readme}}"
PLACEHOLDER_CRATE: str = "{{crate}}"
PLACEHOLDER_LICENSE: str = "{{license}}"
PLACEHOLDER_VERSION: str = "{{version}}"
