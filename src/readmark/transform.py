# topmark:header:start
#
#   project      : ReadMark
#   file         : transform.py
#   file_relpath : src/readmark/transform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transform rustdoc documentation lines into Markdown.

Code block start tags are rewritten from rustdoc into their Markdown equivalent:

* "```", "```rust", "```no_run", "```ignore" and "```should_panic" (optionally
  prefixed with ``rust,``) become "```rust";
* "```text" becomes a bare "```" fence;
* fences tagged with any other language are left untouched.

Inside Rust code blocks, hidden sample lines (starting with ``"# "``) are dropped.
Outside code blocks, Markdown headings can be demoted by one level so the crate
name can occupy the top-level heading.

The transformation is a single forward pass: each input line yields at most one
output line, and only the current fence state is remembered between lines.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Final

from readmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from readmark.config.logging import ReadmarkLogger

logger: ReadmarkLogger = get_logger(__name__)

FENCE: Final[str] = "```"
RUST_FENCE: Final[str] = "```rust"
HIDDEN_LINE_PREFIX: Final[str] = "# "

# Is this code block rust?
RE_CODE_RUST: Final[re.Pattern[str]] = re.compile(
    r"^```(rust|((rust,)?(no_run|ignore|should_panic)))?$"
)
# Is this code block just text?
RE_CODE_TEXT: Final[re.Pattern[str]] = re.compile(r"^```text$")
# Is this code block a language other than rust?
RE_CODE_OTHER: Final[re.Pattern[str]] = re.compile(r"^```\w[\w,\+]*$")


class CodeSection(Enum):
    """Fence state of the transformer at the current line."""

    NONE = "none"
    RUST = "rust"
    OTHER = "other"


def _fullmatch(pattern: re.Pattern[str], line: str) -> bool:
    # ``$`` alone would also accept a trailing "\n"; fences must match the whole line.
    return pattern.fullmatch(line) is not None


class DocTransformer:
    """Lazy, stateful line rewriter for crate documentation.

    The transformer wraps an iterable of documentation lines (comment markers
    already stripped) and yields Markdown lines on demand. It holds nothing
    besides the input iterator, the ``indent_headings`` flag and the current
    `CodeSection`, so callers may stop iterating at any point.

    Args:
        lines (Iterable[str]): Documentation lines, one per source comment line.
        indent_headings (bool): If True, demote headings found outside code blocks
            by one level (``#`` becomes ``##``).

    Attributes:
        indent_headings (bool): Whether headings are demoted.
        section (CodeSection): The current fence state; starts as `CodeSection.NONE`.
    """

    indent_headings: bool
    section: CodeSection

    def __init__(self, lines: Iterable[str], indent_headings: bool = True) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.indent_headings = indent_headings
        self.section = CodeSection.NONE

    def __iter__(self) -> DocTransformer:
        return self

    def __next__(self) -> str:
        line: str = next(self._lines)

        # Skip lines that should be hidden in docs
        while self.section is CodeSection.RUST and line.startswith(HIDDEN_LINE_PREFIX):
            logger.trace("Dropping hidden line: %r", line)
            line = next(self._lines)

        if self.section is CodeSection.NONE:
            if self.indent_headings and line.startswith("#"):
                return "#" + line
            if _fullmatch(RE_CODE_RUST, line):
                self._enter(CodeSection.RUST, line)
                return RUST_FENCE
            if _fullmatch(RE_CODE_TEXT, line):
                self._enter(CodeSection.OTHER, line)
                return FENCE
            if _fullmatch(RE_CODE_OTHER, line):
                self._enter(CodeSection.OTHER, line)
        elif line == FENCE:
            logger.trace("Closing %s code block", self.section.value)
            self.section = CodeSection.NONE

        return line

    def _enter(self, section: CodeSection, line: str) -> None:
        logger.trace("Opening %s code block at %r", section.value, line)
        self.section = section


def transform_doc(lines: Iterable[str], indent_headings: bool = True) -> Iterator[str]:
    """Return a fresh lazy transformer over ``lines``.

    Args:
        lines (Iterable[str]): Documentation lines.
        indent_headings (bool): Demote headings outside code blocks by one level.

    Returns:
        Iterator[str]: The transformed Markdown lines.
    """
    return DocTransformer(lines, indent_headings=indent_headings)
