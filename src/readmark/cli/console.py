# topmark:header:start
#
#   project      : ReadMark
#   file         : console.py
#   file_relpath : src/readmark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI output (the generated README, status and error
messages) from internal logging. Use it for messages intended for end users,
while reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def info(self, text: str, *, nl: bool = True) -> None:
        """Write a status message to stderr (suppressed when quiet)."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        verbosity (int): Program-output verbosity; status messages need ``> 0``,
            warnings need ``>= 0``.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    verbosity: int
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity: int = 0,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.verbosity = verbosity
        self.out = out
        self.err = err

    def _out(self) -> TextIO:
        # Resolved lazily so Click's test runner can swap the streams.
        return self.out or sys.stdout

    def _err(self) -> TextIO:
        return self.err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self._out(), color=self.enable_color)

    def info(self, text: str, *, nl: bool = True) -> None:
        """Write a status message to stderr when running verbosely."""
        if self.verbosity > 0:
            click.secho(text, nl=nl, file=self._err(), color=self.enable_color, fg="green")

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr unless running quietly."""
        if self.verbosity >= 0:
            click.secho(text, nl=nl, file=self._err(), color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self._err(), color=self.enable_color, fg="bright_red")
