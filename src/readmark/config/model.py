# topmark:header:start
#
#   project      : ReadMark
#   file         : model.py
#   file_relpath : src/readmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark configuration model.

Configuration is layered, last wins:

1. built-in defaults;
2. ``[package.metadata.readmark]`` in ``Cargo.toml``;
3. ``readmark.toml`` in the project root;
4. command-line options.

Layers are collected in a `MutableConfig` whose tri-state fields (``None`` means
"not set by this layer") are merged with `MutableConfig.merge_with`, then frozen
into an immutable `Config` consumed by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from readmark.config.keys import Toml
from readmark.config.loaders import get_table, load_toml_dict
from readmark.config.logging import get_logger
from readmark.constants import (
    CARGO_MANIFEST_NAME,
    CONFIG_FILE_NAME,
    MANIFEST_METADATA_SECTION,
)
from readmark.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from readmark.config.logging import ReadmarkLogger
    from readmark.config.loaders import TomlTable

logger: ReadmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for README generation.

    Attributes:
        template (str | None): Template path (relative to the project root), or None
            to fall back to ``README.tpl`` when it exists.
        no_template (bool): Ignore any template, including ``README.tpl``.
        add_title (bool): Prepend the ``# <crate>`` title line.
        add_license (bool): Append the ``License: <license>`` line.
        indent_headings (bool): Demote documentation headings by one level.
        output (str | None): Output file (relative to the project root); None for stdout.
        config_files (tuple[str, ...]): Configuration sources that were applied.
    """

    template: str | None = None
    no_template: bool = False
    add_title: bool = True
    add_license: bool = True
    indent_headings: bool = True
    output: str | None = None
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            template=self.template,
            no_template=self.no_template,
            add_title=self.add_title,
            add_license=self.add_license,
            indent_headings=self.indent_headings,
            output=self.output,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration layer used during discovery and merging.

    Every field is tri-state: ``None`` means the layer does not set it.
    """

    template: str | None = None
    no_template: bool | None = None
    add_title: bool | None = None
    add_license: bool | None = None
    indent_headings: bool | None = None
    output: str | None = None
    config_files: list[str] = field(default_factory=list)

    def freeze(self) -> Config:
        """Freeze this layer into an immutable `Config`, filling in defaults."""
        defaults = Config()
        if self.template is not None and self.no_template:
            raise ConfigError("Options 'template' and 'no-template' cannot be used together")
        return Config(
            template=self.template,
            no_template=defaults.no_template if self.no_template is None else self.no_template,
            add_title=defaults.add_title if self.add_title is None else self.add_title,
            add_license=defaults.add_license if self.add_license is None else self.add_license,
            indent_headings=defaults.indent_headings
            if self.indent_headings is None
            else self.indent_headings,
            output=self.output,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a layer holding the built-in defaults."""
        defaults = Config()
        return cls(
            no_template=defaults.no_template,
            add_title=defaults.add_title,
            add_license=defaults.add_license,
            indent_headings=defaults.indent_headings,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str) -> MutableConfig:
        """Build a layer from a ReadMark configuration table.

        Unknown keys are logged and ignored.

        Args:
            data (TomlTable): The configuration table (already unwrapped).
            source (str): Name of the source, reported in errors and `Config.config_files`.

        Returns:
            MutableConfig: The configuration layer.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        for key in data:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

        def _str(key: str) -> str | None:
            value: Any = data.get(key)
            if value is None or isinstance(value, str):
                return value
            raise ConfigError(f"{source}: '{key}' must be a string, got {type(value).__name__}")

        def _bool(key: str) -> bool | None:
            value: Any = data.get(key)
            if value is None or isinstance(value, bool):
                return value
            raise ConfigError(f"{source}: '{key}' must be a boolean, got {type(value).__name__}")

        return cls(
            template=_str(Toml.KEY_TEMPLATE),
            no_template=_bool(Toml.KEY_NO_TEMPLATE),
            add_title=_bool(Toml.KEY_TITLE),
            add_license=_bool(Toml.KEY_LICENSE),
            indent_headings=_bool(Toml.KEY_INDENT_HEADINGS),
            output=_str(Toml.KEY_OUTPUT),
            config_files=[source],
        )

    @classmethod
    def from_manifest_dict(cls, manifest: TomlTable) -> MutableConfig:
        """Build a layer from the ``[package.metadata.readmark]`` table of ``Cargo.toml``."""
        table: TomlTable = get_table(manifest, MANIFEST_METADATA_SECTION)
        if not table:
            return cls()
        return cls.from_toml_dict(table, source=CARGO_MANIFEST_NAME)

    @classmethod
    def load_merged(cls, project_root: Path, manifest: TomlTable | None = None) -> MutableConfig:
        """Return defaults merged with the project's configuration files.

        Args:
            project_root (Path): Directory holding ``Cargo.toml``.
            manifest (TomlTable | None): Unwrapped ``Cargo.toml``, if already loaded.

        Returns:
            MutableConfig: The merged layer (CLI overrides not applied yet).
        """
        merged: MutableConfig = cls.from_defaults()

        if manifest is not None:
            merged = merged.merge_with(cls.from_manifest_dict(manifest))

        config_path: Path = project_root / CONFIG_FILE_NAME
        if config_path.is_file():
            logger.debug("Loading configuration from %s", config_path)
            layer = cls.from_toml_dict(load_toml_dict(config_path), source=CONFIG_FILE_NAME)
            merged = merged.merge_with(layer)

        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new layer where values set in ``other`` override this one.

        ``template`` and ``no-template`` override each other: a template set by
        ``other`` re-enables templates, and ``no-template`` in ``other`` drops a
        template inherited from this layer. Setting both in ``other`` is left for
        `freeze` to reject.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        template: str | None = pick(self.template, other.template)
        no_template: bool | None = pick(self.no_template, other.no_template)
        if other.no_template and other.template is None:
            template = None
        elif other.template is not None and not other.no_template:
            no_template = False

        return MutableConfig(
            template=template,
            no_template=no_template,
            add_title=pick(self.add_title, other.add_title),
            add_license=pick(self.add_license, other.add_license),
            indent_headings=pick(self.indent_headings, other.indent_headings),
            output=pick(self.output, other.output),
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply command-line overrides in place.

        Only keys present in ``args`` with a non-None value override the layer.
        A template given on the command line clears a configured ``no-template``
        and vice versa, so the command line always wins.

        Args:
            args (Mapping[str, Any]): Parsed arguments keyed by `Config` field name.

        Returns:
            MutableConfig: This instance, for chaining.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append("<CLI overrides>")

        if args.get("template") is not None:
            self.template = args["template"]
            self.no_template = False
        if args.get("no_template"):
            self.no_template = True
            self.template = None
        for name in ("add_title", "add_license", "indent_headings", "output"):
            if args.get(name) is not None:
                setattr(self, name, args[name])
        return self
