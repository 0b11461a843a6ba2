# topmark:header:start
#
#   project      : ReadMark
#   file         : __init__.py
#   file_relpath : src/readmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark package.

ReadMark generates a README from the crate-level doc comments of a Rust project.
It extracts the ``//!`` or ``/*! */`` documentation of the crate entry point,
rewrites rustdoc code fences and headings into plain Markdown, and optionally
merges the result into a template. It exposes both a CLI and a small API.
"""

from __future__ import annotations

from readmark.errors import ReadmeError
from readmark.readme import generate_readme, render_docs
from readmark.transform import CodeSection, DocTransformer, transform_doc

__all__ = [
    "CodeSection",
    "DocTransformer",
    "ReadmeError",
    "generate_readme",
    "render_docs",
    "transform_doc",
]
