# topmark:header:start
#
#   project      : ReadMark
#   file         : test_readme.py
#   file_relpath : tests/test_readme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the README generation pipeline (library API)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from readmark import generate_readme, render_docs
from readmark.errors import ReadmeError
from readmark.manifest import CargoManifest
from readmark.readme import assemble_readme, render_doc_lines

if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import CrateFactory

SOURCE = """\
//! # Usage
//!
//! ```no_run
//! # use my_crate::run;
//! run();
//! ```
//!
//! ```text
//! output
//! ```

fn main() {}
"""


def test_render_docs() -> None:
    assert render_docs(SOURCE).splitlines() == [
        "## Usage",
        "",
        "```rust",
        "run();",
        "```",
        "",
        "```",
        "output",
        "```",
    ]


def test_render_docs_without_heading_indent() -> None:
    assert render_docs(SOURCE, indent_headings=False).startswith("# Usage\n")


def test_generate_readme_defaults(make_crate: CrateFactory) -> None:
    root: Path = make_crate()
    out: str = generate_readme(root, "//! Hello.")
    assert out == "# my-crate\n\nHello.\n\nLicense: MIT"


def test_generate_readme_no_title_no_license(make_crate: CrateFactory) -> None:
    root: Path = make_crate()
    out: str = generate_readme(root, "//! Hello.", add_title=False, add_license=False)
    assert out == "Hello."


def test_generate_readme_with_template(make_crate: CrateFactory) -> None:
    root: Path = make_crate()
    out: str = generate_readme(root, "//! Hello.", "{{crate}} v{{version}}\n\n{{readme}}\n")
    assert out == "my-crate v0.1.0\n\nHello.\n\nLicense: MIT"


def test_generate_readme_uses_given_manifest(tmp_path: Path) -> None:
    manifest = CargoManifest(name="given", license="Apache-2.0")
    out: str = generate_readme(tmp_path, "//! Hi.", manifest=manifest)
    assert out == "# given\n\nHi.\n\nLicense: Apache-2.0"


def test_missing_license_is_an_error() -> None:
    with pytest.raises(ReadmeError, match="There is no license in Cargo.toml"):
        assemble_readme("Docs.", CargoManifest(name="x"))


def test_missing_license_ignored_when_not_requested() -> None:
    assert assemble_readme("Docs.", CargoManifest(name="x"), add_license=False) == "# x\n\nDocs."


def test_render_doc_lines_takes_extracted_lines() -> None:
    assert render_doc_lines(["# Title", "```", "# hidden", "x", "```"]) == (
        "## Title\n```rust\nx\n```"
    )
