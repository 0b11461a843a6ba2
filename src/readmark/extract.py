# topmark:header:start
#
#   project      : ReadMark
#   file         : extract.py
#   file_relpath : src/readmark/extract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extract crate-level documentation from Rust source text.

Two inner doc comment styles are supported:

* line comments: every line starts with ``//!``;
* block comments: ``/*! ... */``, possibly spanning many lines and containing
  nested ``/* ... */`` pairs.

The first line starting with either marker selects the style; the other style
is not recognized afterwards (styles cannot be mixed). Everything before that
line (attributes, license banners, blank lines) is ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from readmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from readmark.config.logging import ReadmarkLogger

logger: ReadmarkLogger = get_logger(__name__)


class DocCommentExtractor:
    """Base class for doc comment extractors.

    Subclasses decide whether a source line opens their comment style
    (`opens`) and collect the documentation lines that follow (`extract`).
    """

    #: Human-readable style name used in logs.
    style: str = ""

    def opens(self, line: str) -> bool:
        """Return True if ``line`` starts a doc comment of this style."""
        raise NotImplementedError

    def extract(self, first_line: str, rest: Iterator[str]) -> list[str]:
        """Collect documentation lines, starting at ``first_line``.

        Args:
            first_line (str): The line for which `opens` returned True.
            rest (Iterator[str]): The remaining source lines; consumed as needed.

        Returns:
            list[str]: Documentation lines without comment markers.
        """
        raise NotImplementedError


class LineDocCommentExtractor(DocCommentExtractor):
    """Extractor for ``//!`` line comments."""

    style = "line"
    line_prefix: str = "//!"

    def opens(self, line: str) -> bool:
        return line.startswith(self.line_prefix)

    def strip_line_prefix(self, line: str) -> str:
        """Remove the comment marker and a single following space.

        Trailing spaces are kept: two of them mark a Markdown hard line break.
        """
        line = line.rstrip("\r\n")
        if line.rstrip() == self.line_prefix:
            return ""
        payload: str = line[len(self.line_prefix) :]
        if payload.startswith(" "):
            payload = payload[1:]
        return payload

    def extract(self, first_line: str, rest: Iterator[str]) -> list[str]:
        docs: list[str] = [self.strip_line_prefix(first_line)]
        for line in rest:
            if self.opens(line):
                docs.append(self.strip_line_prefix(line))
            elif line.strip():
                break
        return docs


class BlockDocCommentExtractor(DocCommentExtractor):
    """Extractor for ``/*! ... */`` block comments (nesting aware)."""

    style = "block"
    block_prefix: str = "/*!"
    block_suffix: str = "*/"
    nested_prefix: str = "/*"

    def opens(self, line: str) -> bool:
        return line.startswith(self.block_prefix)

    def _find_close(self, text: str, depth: int) -> tuple[int, int | None]:
        """Scan ``text`` for the closing marker of the outermost block.

        Returns:
            tuple[int, int | None]: The nesting depth after the scan and the index
                of the closing marker (None if the block stays open).
        """
        i = 0
        while i < len(text) - 1:
            pair: str = text[i : i + 2]
            if pair == self.nested_prefix:
                depth += 1
                i += 2
            elif pair == self.block_suffix:
                if depth == 0:
                    return depth, i
                depth -= 1
                i += 2
            else:
                i += 1
        return depth, None

    def extract(self, first_line: str, rest: Iterator[str]) -> list[str]:
        docs: list[str] = []

        head: str = first_line[len(self.block_prefix) :]
        depth, close = self._find_close(head, 0)
        if close is not None:
            head = head[:close]
        if head.strip():
            docs.append(head.strip())
        if close is not None:
            return docs

        for line in rest:
            depth, close = self._find_close(line, depth)
            if close is None:
                docs.append(line.rstrip("\r\n"))
                continue
            tail: str = line[:close].rstrip()
            if tail.strip():
                docs.append(tail)
            return docs

        logger.warning("Unterminated '%s' doc comment", self.block_prefix)
        return docs


EXTRACTORS: Final[tuple[DocCommentExtractor, ...]] = (
    LineDocCommentExtractor(),
    BlockDocCommentExtractor(),
)


def extract_docs(source: str | Iterable[str]) -> list[str]:
    """Return the crate-level documentation lines found in ``source``.

    Args:
        source (str | Iterable[str]): Source text, or its lines without line endings.

    Returns:
        list[str]: Documentation lines with comment markers stripped; empty when the
            source has no inner doc comment.
    """
    lines: Iterable[str] = source.splitlines() if isinstance(source, str) else source
    it: Iterator[str] = iter(lines)
    for line in it:
        for extractor in EXTRACTORS:
            if extractor.opens(line):
                logger.debug("Found %s style doc comment", extractor.style)
                return extractor.extract(line, it)
    logger.debug("No crate-level doc comment found")
    return []
