# topmark:header:start
#
#   project      : ReadMark
#   file         : main.py
#   file_relpath : src/readmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands pick the shared console up from there.
"""

from __future__ import annotations

import click

from readmark.cli.commands.readme import readme_command
from readmark.cli.commands.version import version_command
from readmark.cli.console import ClickConsole
from readmark.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from readmark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    verbosity: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    # Internal logging is configured via env, independently of program output.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, verbosity=verbosity)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Generate README.md from crate doc comments.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ReadMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'readmark readme' to render the README of the current crate.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(readme_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
