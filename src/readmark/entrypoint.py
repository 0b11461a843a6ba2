# topmark:header:start
#
#   project      : ReadMark
#   file         : entrypoint.py
#   file_relpath : src/readmark/entrypoint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the source file holding the crate documentation.

Resolution order when no input file is given:

1. ``src/main.rs``;
2. ``src/lib.rs``;
3. the ``path`` of the ``[lib]`` target in ``Cargo.toml``;
4. the ``path`` of the single ``[[bin]]`` target in ``Cargo.toml``.

Several ``[[bin]]`` targets are ambiguous and reported as an error listing the
candidates, so the user can pick one with ``--input``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from readmark.config.logging import get_logger
from readmark.errors import EntrypointError

if TYPE_CHECKING:
    from readmark.config.logging import ReadmarkLogger
    from readmark.manifest import CargoManifest

logger: ReadmarkLogger = get_logger(__name__)

DEFAULT_ENTRYPOINTS: tuple[str, ...] = ("src/main.rs", "src/lib.rs")


def find_entrypoint(project_root: Path, manifest: CargoManifest) -> Path:
    """Return the documentation entry point of the crate at ``project_root``.

    Args:
        project_root (Path): Directory containing ``Cargo.toml``.
        manifest (CargoManifest): The parsed manifest.

    Returns:
        Path: Absolute path of the entry point source file.

    Raises:
        EntrypointError: If no entry point exists, or several binaries compete.
    """
    for relpath in DEFAULT_ENTRYPOINTS:
        candidate: Path = project_root / relpath
        if candidate.is_file():
            logger.debug("Using default entrypoint %s", relpath)
            return candidate

    if manifest.lib is not None and manifest.lib.path:
        logger.debug("Using [lib] entrypoint %s", manifest.lib.path)
        return project_root / manifest.lib.path

    bin_paths: list[str] = [b.path for b in manifest.bins if b.path]
    if len(bin_paths) == 1:
        logger.debug("Using [[bin]] entrypoint %s", bin_paths[0])
        return project_root / bin_paths[0]
    if len(bin_paths) > 1:
        raise EntrypointError(f"Multiple binaries found, choose one: [{', '.join(bin_paths)}]")

    raise EntrypointError("No entrypoint found")


def get_source_path(
    project_root: Path,
    manifest: CargoManifest,
    input_path: Path | str | None = None,
) -> Path:
    """Return the source file to read, honoring an explicit ``--input`` value.

    Relative input paths are resolved against ``project_root``.

    Raises:
        EntrypointError: If the explicit input does not exist, or no entry point is found.
    """
    if input_path is None:
        return find_entrypoint(project_root, manifest)

    path: Path = Path(input_path)
    if not path.is_absolute():
        path = project_root / path
    if not path.is_file():
        raise EntrypointError(f"Input file not found: '{input_path}'", missing=True)
    return path
