# topmark:header:start
#
#   project      : ReadMark
#   file         : test_extract.py
#   file_relpath : tests/test_extract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for crate-level doc comment extraction."""

from __future__ import annotations

from readmark.extract import BlockDocCommentExtractor, LineDocCommentExtractor, extract_docs


def test_line_comments_are_extracted() -> None:
    source = "//! # My crate\n//!\n//! Some text.\n\nfn main() {}\n"
    assert extract_docs(source) == ["# My crate", "", "Some text."]


def test_line_comment_prefix_strips_one_space_only() -> None:
    source = "//!    indented\n//!no space\n"
    assert extract_docs(source) == ["   indented", "no space"]


def test_leading_attributes_and_blank_lines_are_ignored() -> None:
    source = "\n#![deny(missing_docs)]\n// plain comment\n//! docs\nuse std::io;\n"
    assert extract_docs(source) == ["docs"]


def test_blank_lines_between_line_comments_are_skipped() -> None:
    source = "//! first\n\n//! second\n"
    assert extract_docs(source) == ["first", "second"]


def test_extraction_stops_at_first_code_line() -> None:
    source = "//! first\nfn main() {}\n//! not crate docs\n"
    assert extract_docs(source) == ["first"]


def test_outer_doc_comments_are_not_crate_docs() -> None:
    assert extract_docs("/// item docs\nfn f() {}\n") == []


def test_no_docs_returns_empty_list() -> None:
    assert extract_docs("fn main() {}\n") == []
    assert extract_docs("") == []


def test_accepts_iterable_of_lines() -> None:
    assert extract_docs(["//! a", "//! b"]) == ["a", "b"]


def test_block_comment_single_line() -> None:
    assert extract_docs("/*! one liner */\nfn main() {}\n") == ["one liner"]


def test_block_comment_multi_line() -> None:
    source = "/*!\n# Title\n\nBody text.\n*/\nfn main() {}\n"
    assert extract_docs(source) == ["# Title", "", "Body text."]


def test_block_comment_with_text_on_delimiter_lines() -> None:
    source = "/*! first\nsecond\nthird */\n"
    assert extract_docs(source) == ["first", "second", "third"]


def test_block_comment_respects_nesting() -> None:
    source = "/*!\nouter\n/* inner */\nstill docs\n*/\nfn main() {}\n"
    assert extract_docs(source) == ["outer", "/* inner */", "still docs"]


def test_unterminated_block_comment_keeps_collected_lines() -> None:
    assert extract_docs("/*!\nlost\n") == ["lost"]


def test_line_extractor_opens_only_on_inner_marker() -> None:
    extractor = LineDocCommentExtractor()
    assert extractor.opens("//! x")
    assert not extractor.opens("/// x")
    assert extractor.strip_line_prefix("//!") == ""
    assert extractor.strip_line_prefix("//!   ") == ""
    assert extractor.strip_line_prefix("//! line\r\n") == "line"


def test_block_extractor_find_close_tracks_depth() -> None:
    extractor = BlockDocCommentExtractor()
    assert extractor._find_close("a /* b */ c */", 0) == (0, 12)  # pyright: ignore
    assert extractor._find_close("/* open", 0) == (1, None)  # pyright: ignore[reportPrivateUsage]


def test_trailing_spaces_are_kept_for_hard_line_breaks() -> None:
    source = "//! first line  \n//! second line\n"
    assert extract_docs(source) == ["first line  ", "second line"]


def test_block_comment_keeps_trailing_spaces() -> None:
    assert extract_docs("/*!\nfirst  \nsecond\n*/\n") == ["first  ", "second"]
