# topmark:header:start
#
#   project      : ReadMark
#   file         : manifest.py
#   file_relpath : src/readmark/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read the crate manifest (``Cargo.toml``).

Only the handful of keys ReadMark needs are modelled: the package name, version
and license, the ``[lib]`` target and the ``[[bin]]`` targets. Parsing is done
with `tomlkit` and unwrapped into plain Python structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from readmark.config.logging import get_logger
from readmark.constants import CARGO_MANIFEST_NAME
from readmark.errors import ManifestError

if TYPE_CHECKING:
    from readmark.config.logging import ReadmarkLogger

logger: ReadmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class CargoTarget:
    """A ``[lib]`` or ``[[bin]]`` target declared in the manifest."""

    name: str | None = None
    path: str | None = None


@dataclass(frozen=True)
class CargoManifest:
    """The subset of ``Cargo.toml`` used to render a README.

    Attributes:
        name (str): Package name (``[package] name``).
        version (str | None): Package version, if declared as a plain string.
        license (str | None): SPDX license expression, or the ``license-file``
            value when no expression is given.
        lib (CargoTarget | None): The ``[lib]`` target, if declared.
        bins (tuple[CargoTarget, ...]): The ``[[bin]]`` targets in manifest order.
        raw (dict[str, Any]): The full unwrapped manifest.
    """

    name: str
    version: str | None = None
    license: str | None = None
    lib: CargoTarget | None = None
    bins: tuple[CargoTarget, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CargoManifest:
        """Build a manifest from an unwrapped ``Cargo.toml`` mapping.

        Raises:
            ManifestError: If the ``[package]`` table or its ``name`` is missing.
        """
        package: Any = data.get("package")
        if not isinstance(package, dict) or not isinstance(package.get("name"), str):
            raise ManifestError("No package name found in Cargo.toml")

        version: Any = package.get("version")
        license_value: Any = package.get("license") or package.get("license-file")

        lib: CargoTarget | None = None
        lib_table: Any = data.get("lib")
        if isinstance(lib_table, dict):
            lib = _target_from_table(lib_table)

        bins: list[CargoTarget] = []
        bin_tables: Any = data.get("bin", [])
        if isinstance(bin_tables, list):
            bins = [_target_from_table(t) for t in bin_tables if isinstance(t, dict)]

        return cls(
            name=package["name"],
            version=version if isinstance(version, str) else None,
            license=license_value if isinstance(license_value, str) else None,
            lib=lib,
            bins=tuple(bins),
            raw=data,
        )


def _target_from_table(table: dict[str, Any]) -> CargoTarget:
    name: Any = table.get("name")
    path: Any = table.get("path")
    return CargoTarget(
        name=name if isinstance(name, str) else None,
        path=path if isinstance(path, str) else None,
    )


def load_manifest_dict(project_root: Path) -> dict[str, Any]:
    """Load and parse ``Cargo.toml`` from ``project_root``.

    Raises:
        ManifestError: If the file cannot be read, is not UTF-8 or is not valid TOML.
    """
    path: Path = project_root / CARGO_MANIFEST_NAME
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading %s: %s", path, e)
        raise ManifestError(f"Could not read '{path}': {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        raise ManifestError(
            f"Cannot decode '{path}' as UTF-8: {e.reason}", encoding=True
        ) from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ManifestError(f"Invalid TOML in '{path}': {e}") from e

    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def load_manifest(project_root: Path) -> CargoManifest:
    """Return the parsed `CargoManifest` of the project at ``project_root``."""
    manifest: CargoManifest = CargoManifest.from_dict(load_manifest_dict(project_root))
    logger.debug(
        "Loaded manifest for %s (version=%s, license=%s, bins=%d)",
        manifest.name,
        manifest.version,
        manifest.license,
        len(manifest.bins),
    )
    return manifest


def find_project_root(start: Path | str | None = None) -> Path:
    """Find the directory holding ``Cargo.toml``.

    Starting at ``start`` (default: the current directory), walk up the parents
    and return the first directory containing a manifest.

    Args:
        start (Path | str | None): Directory to start from.

    Returns:
        Path: The resolved project root.

    Raises:
        ManifestError: If no directory on the way up has a ``Cargo.toml``.
    """
    origin: Path = Path(start).resolve() if start is not None else Path.cwd().resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / CARGO_MANIFEST_NAME).is_file():
            logger.debug("Project root: %s", candidate)
            return candidate
    raise ManifestError(
        f"`{CARGO_MANIFEST_NAME}` not found in '{origin}' or any parent directory",
        missing=True,
    )


def get_project_root(explicit: Path | str | None = None) -> Path:
    """Return the project root, honoring an explicit ``--project-root`` value.

    An explicit root is used as given (no upward search) and must contain a manifest.

    Raises:
        ManifestError: If no manifest is found.
    """
    if explicit is None:
        return find_project_root()
    root: Path = Path(explicit).resolve()
    if not (root / CARGO_MANIFEST_NAME).is_file():
        raise ManifestError(f"`{CARGO_MANIFEST_NAME}` not found in '{root}'", missing=True)
    return root
