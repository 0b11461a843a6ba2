# topmark:header:start
#
#   project      : ReadMark
#   file         : errors.py
#   file_relpath : src/readmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ReadMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`readmark.errors.ReadmeError`) are
    translated with `from_readme_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from readmark.cli.exit_codes import ExitCode
from readmark.errors import (
    ConfigError,
    ManifestError,
    ReadmeError,
    TemplateError,
)


class ReadmarkError(click.ClickException):
    """Base class for all ReadMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (uncolored)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class ReadmarkUsageError(ReadmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ReadmarkConfigError(ReadmarkError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ReadmarkFileNotFoundError(ReadmarkError):
    """Error when an input path, template or manifest does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ReadmarkIOError(ReadmarkError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ReadmarkEncodingError(ReadmarkError):
    """Error for text decoding/encoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class ReadmarkTemplateError(ReadmarkError):
    """Error for templates that cannot be rendered."""

    exit_code = ExitCode.FAILURE


class ReadmarkUnexpectedError(ReadmarkError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def from_readme_error(exc: ReadmeError) -> ReadmarkError:
    """Map a library error onto the matching CLI error (and exit code)."""
    message: str = exc.message
    if exc.missing:
        return ReadmarkFileNotFoundError(message)
    if exc.encoding:
        return ReadmarkEncodingError(message)
    if isinstance(exc, (ConfigError, ManifestError)):
        return ReadmarkConfigError(message)
    if isinstance(exc, TemplateError):
        return ReadmarkTemplateError(message)
    return ReadmarkError(message)
