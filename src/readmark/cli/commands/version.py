# topmark:header:start
#
#   project      : ReadMark
#   file         : version.py
#   file_relpath : src/readmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark `version` command.

Prints the current ReadMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from readmark.constants import READMARK_VERSION

if TYPE_CHECKING:
    from readmark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ReadMark.",
)
def version_command() -> None:
    """Show the current version of ReadMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(READMARK_VERSION)
