# topmark:header:start
#
#   project      : ReadMark
#   file         : __main__.py
#   file_relpath : src/readmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ReadMark via ``python -m readmark``.

It delegates directly to :func:`readmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ReadMark is launched.

Examples:
    Render the README of the crate in the current directory::

        python -m readmark readme
"""

from __future__ import annotations

from readmark.cli.main import cli

if __name__ == "__main__":
    cli()
