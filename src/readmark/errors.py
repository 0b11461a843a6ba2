# topmark:header:start
#
#   project      : ReadMark
#   file         : errors.py
#   file_relpath : src/readmark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions for ReadMark.

These exceptions carry a human-readable message and never print anything.
The CLI maps them onto Click exceptions with dedicated exit codes (see
`readmark.cli.errors`).
"""

from __future__ import annotations


class ReadmeError(Exception):
    """Base class for all errors raised while generating a README.

    Args:
        message (str): Human-readable description of the problem.
        missing (bool): True when the error is caused by a file that does not exist.
        encoding (bool): True when a file could not be decoded as UTF-8.
    """

    def __init__(self, message: str, *, missing: bool = False, encoding: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.missing = missing
        self.encoding = encoding

    def __str__(self) -> str:
        return self.message


class ManifestError(ReadmeError):
    """``Cargo.toml`` is missing, unreadable or malformed."""


class EntrypointError(ReadmeError):
    """The documentation entry point could not be determined."""


class TemplateError(ReadmeError):
    """The README template cannot be rendered."""


class ConfigError(ReadmeError):
    """A ReadMark configuration value is invalid."""
