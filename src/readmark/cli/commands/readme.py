# topmark:header:start
#
#   project      : ReadMark
#   file         : readme.py
#   file_relpath : src/readmark/cli/commands/readme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark ``readme`` command.

Renders the crate-level documentation of a Rust project as Markdown, optionally
through a template, and prints it (or writes it with ``--output``).

Examples:
  Print the README of the crate in the current directory:

    $ readmark readme

  Write it next to ``Cargo.toml``:

    $ readmark readme --output README.md
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from readmark.cli.errors import (
    ReadmarkEncodingError,
    ReadmarkFileNotFoundError,
    ReadmarkIOError,
    ReadmarkUsageError,
    from_readme_error,
)
from readmark.cli.options import CONTEXT_SETTINGS
from readmark.config import Config, MutableConfig
from readmark.config.logging import get_logger
from readmark.entrypoint import get_source_path
from readmark.errors import ReadmeError
from readmark.extract import extract_docs
from readmark.manifest import CargoManifest, get_project_root, load_manifest_dict
from readmark.readme import assemble_readme, render_doc_lines
from readmark.template import get_template_path

if TYPE_CHECKING:
    from readmark.cli.console import ConsoleLike

logger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Read a UTF-8 text file, mapping failures onto CLI errors.

    Raises:
        ReadmarkFileNotFoundError: If the file does not exist.
        ReadmarkEncodingError: If the file is not valid UTF-8.
        ReadmarkIOError: For any other read failure.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ReadmarkFileNotFoundError(f"File not found: '{path}'") from e
    except UnicodeDecodeError as e:
        raise ReadmarkEncodingError(f"Cannot decode '{path}' as UTF-8: {e.reason}") from e
    except OSError as e:
        raise ReadmarkIOError(f"Cannot read '{path}': {e.strerror or e}") from e


def write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` (UTF-8), creating parent directories.

    Raises:
        ReadmarkIOError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ReadmarkIOError(f"Cannot write '{path}': {e.strerror or e}") from e


def resolve_config(
    project_root: Path,
    manifest_dict: dict[str, Any],
    cli_args: dict[str, Any],
) -> Config:
    """Merge defaults, project configuration and CLI overrides into a `Config`."""
    draft: MutableConfig = MutableConfig.load_merged(project_root, manifest_dict)
    config: Config = draft.apply_cli_args(cli_args).freeze()
    logger.debug("Effective configuration: %s", config)
    return config


@click.command(
    name="readme",
    help="Generate README.md from the crate doc comments.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
The entry point is, in order: src/main.rs, src/lib.rs, the [lib] path in
Cargo.toml, then the single [[bin]] path in Cargo.toml.

Examples:

  # Print the README to stdout
  readmark readme

  # Render through a template and write README.md
  readmark readme --template README.tpl --output README.md
""",
)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=str,
    default=None,
    help="File to read from (default: resolved entry point of the crate).",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=str,
    default=None,
    help="File to write to. If not provided, will output to stdout.",
)
@click.option(
    "-r",
    "--project-root",
    "project_root",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Directory holding Cargo.toml (default: search from the current directory up).",
)
@click.option(
    "-t",
    "--template",
    "template",
    type=str,
    default=None,
    help="Template used to render the output (default: README.tpl if it exists).",
)
@click.option(
    "--no-title",
    "no_title",
    is_flag=True,
    help="Do not prepend the '# crate-name' title (a template's {{crate}} takes precedence).",
)
@click.option(
    "--no-license",
    "no_license",
    is_flag=True,
    help="Do not append the license line (a template's {{license}} takes precedence).",
)
@click.option(
    "--no-template",
    "no_template",
    is_flag=True,
    help="Ignore the template file; only useful to skip the default README.tpl.",
)
@click.option(
    "--no-indent-headings",
    "no_indent_headings",
    is_flag=True,
    help="Do not add an extra level to headings ('#' stays '#').",
)
def readme_command(
    *,
    input_path: str | None,
    output_path: str | None,
    project_root: str | None,
    template: str | None,
    no_title: bool,
    no_license: bool,
    no_template: bool,
    no_indent_headings: bool,
) -> None:
    """Render the crate documentation as a README.

    Args:
        input_path (str | None): Source file to read (relative to the project root).
        output_path (str | None): File to write (relative to the project root).
        project_root (str | None): Directory holding ``Cargo.toml``.
        template (str | None): Template file (relative to the project root).
        no_title (bool): Do not prepend the title line.
        no_license (bool): Do not append the license line.
        no_template (bool): Ignore any template.
        no_indent_headings (bool): Keep heading levels unchanged.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if template is not None and no_template:
        raise ReadmarkUsageError(
            "Options '--template' and '--no-template' cannot be used together."
        )

    try:
        root: Path = get_project_root(project_root)
        manifest_dict: dict[str, Any] = load_manifest_dict(root)
        manifest: CargoManifest = CargoManifest.from_dict(manifest_dict)

        config: Config = resolve_config(
            root,
            manifest_dict,
            {
                "template": template,
                "no_template": no_template,
                "add_title": False if no_title else None,
                "add_license": False if no_license else None,
                "indent_headings": False if no_indent_headings else None,
                "output": output_path,
            },
        )

        source_path: Path = get_source_path(root, manifest, input_path)
        console.info(f"Reading documentation from {source_path}")
        source: str = read_text(source_path)
        docs: list[str] = extract_docs(source)
        if not docs:
            console.warn(f"Warning: no crate-level doc comment found in {source_path}")

        template_text: str | None = None
        if not config.no_template:
            template_path: Path | None = get_template_path(root, config.template)
            if template_path is not None:
                console.info(f"Using template {template_path}")
                template_text = read_text(template_path)

        readme: str = assemble_readme(
            render_doc_lines(docs, indent_headings=config.indent_headings),
            manifest,
            template_text,
            add_title=config.add_title,
            add_license=config.add_license,
        )
    except ReadmeError as exc:
        raise from_readme_error(exc) from exc

    if config.output is None:
        console.print(readme)
        return

    target: Path = Path(config.output)
    if not target.is_absolute():
        target = root / target
    write_text(target, readme if readme.endswith("\n") else readme + "\n")
    console.info(f"README written to {target}")
