# topmark:header:start
#
#   project      : ReadMark
#   file         : readme.py
#   file_relpath : src/readmark/readme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generate a README from crate documentation.

This is the library entry point behind ``readmark readme``. It chains the
pipeline stages:

    source text -> doc comment extraction -> Markdown transformation
    -> template rendering (or title/license assembly)

Example:
    ```python
    from pathlib import Path
    from readmark.readme import generate_readme

    root = Path("my-crate")
    text = (root / "src" / "lib.rs").read_text(encoding="utf-8")
    print(generate_readme(root, text))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from readmark.config.logging import get_logger
from readmark.errors import ReadmeError
from readmark.extract import extract_docs
from readmark.manifest import load_manifest
from readmark.template import append_license, prepend_title, render_template
from readmark.transform import transform_doc

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from readmark.config.logging import ReadmarkLogger
    from readmark.manifest import CargoManifest

logger: ReadmarkLogger = get_logger(__name__)


def render_docs(source: str | Iterable[str], *, indent_headings: bool = True) -> str:
    """Extract the crate documentation from ``source`` and render it as Markdown.

    Args:
        source (str | Iterable[str]): Rust source text or its lines.
        indent_headings (bool): Demote headings outside code blocks by one level.

    Returns:
        str: The Markdown body, lines joined with ``"\\n"``.
    """
    return render_doc_lines(extract_docs(source), indent_headings=indent_headings)


def render_doc_lines(docs: Iterable[str], *, indent_headings: bool = True) -> str:
    """Render already extracted documentation lines as Markdown."""
    return "\n".join(transform_doc(docs, indent_headings=indent_headings))


def assemble_readme(
    readme: str,
    manifest: CargoManifest,
    template: str | None = None,
    *,
    add_title: bool = True,
    add_license: bool = True,
) -> str:
    """Wrap a rendered body into the final document.

    Without a template, the title line is prepended and the license line appended
    as requested. With a template, placeholders take precedence (see
    `readmark.template.render_template`).

    Raises:
        ReadmeError: If a license line is requested but the manifest has none.
        TemplateError: If the template cannot be rendered.
    """
    if template is not None:
        return render_template(
            template,
            readme,
            crate_name=manifest.name,
            license_name=manifest.license,
            version=manifest.version,
            add_title=add_title,
            add_license=add_license,
        )

    if add_license and manifest.license is None:
        raise ReadmeError("There is no license in Cargo.toml")

    if add_title:
        readme = prepend_title(readme, manifest.name)
    if add_license and manifest.license is not None:
        readme = append_license(readme, manifest.license)
    return readme


def generate_readme(
    project_root: Path,
    source: str | Iterable[str],
    template: str | None = None,
    *,
    add_title: bool = True,
    add_license: bool = True,
    indent_headings: bool = True,
    manifest: CargoManifest | None = None,
) -> str:
    """Generate the README text for the crate at ``project_root``.

    Args:
        project_root (Path): Directory holding ``Cargo.toml``.
        source (str | Iterable[str]): Content of the documentation entry point.
        template (str | None): Template text, or None to render without a template.
        add_title (bool): Prepend ``# <crate>`` unless the template places it.
        add_license (bool): Append ``License: <license>`` unless the template places it.
        indent_headings (bool): Demote documentation headings by one level.
        manifest (CargoManifest | None): Pre-loaded manifest; loaded from
            ``project_root`` when None.

    Returns:
        str: The README document (without a trailing newline).

    Raises:
        ReadmeError: On manifest, license or template problems.
    """
    if manifest is None:
        manifest = load_manifest(project_root)

    readme: str = render_docs(source, indent_headings=indent_headings)
    logger.debug("Rendered %d characters of documentation", len(readme))

    return assemble_readme(
        readme,
        manifest,
        template,
        add_title=add_title,
        add_license=add_license,
    )
