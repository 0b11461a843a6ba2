# topmark:header:start
#
#   project      : ReadMark
#   file         : strategies_readmark.py
#   file_relpath : tests/strategies_readmark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating rustdoc-like documentation.

Documents are built from three kinds of blocks: prose lines, Rust code blocks
and foreign-language code blocks. Each block is returned both as rustdoc input
and as the Markdown the transformer is expected to produce for it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

BLACKLIST_CATEGORIES: tuple[str, ...] = ("Cs", "Cc", "Zl", "Zp")

RUST_FENCES: tuple[str, ...] = (
    "```",
    "```rust",
    "```no_run",
    "```ignore",
    "```should_panic",
    "```rust,no_run",
    "```rust,ignore",
    "```rust,should_panic",
)

OTHER_FENCES: tuple[str, ...] = ("```C", "```python", "```toml", "```html,django", "```html+django")

# A pair of (rustdoc input lines, expected Markdown lines)
Block = tuple[list[str], list[str]]


def s_text_line() -> st.SearchStrategy[str]:
    """A single line of free text that never looks like a fence."""
    return st.text(
        alphabet=st.characters(blacklist_categories=BLACKLIST_CATEGORIES, max_codepoint=0x02FF),
        max_size=40,
    ).filter(lambda s: not s.startswith("`"))


def s_code_line() -> st.SearchStrategy[str]:
    """A visible code line: never a fence and never a hidden ``# `` line."""
    return s_text_line().filter(lambda s: not s.startswith("# "))


def s_hidden_line() -> st.SearchStrategy[str]:
    """A hidden sample line."""
    return s_text_line().map(lambda s: "# " + s)


@st.composite
def s_prose_block(draw: Draw, indent_headings: bool = True) -> Block:
    """Prose lines, optionally headings; headings get demoted when requested."""
    lines: list[str] = draw(st.lists(s_text_line(), min_size=1, max_size=5))
    expected: list[str] = [
        "#" + line if indent_headings and line.startswith("#") else line for line in lines
    ]
    return lines, expected


@st.composite
def s_rust_block(draw: Draw) -> Block:
    """A Rust code block mixing visible and hidden lines."""
    fence: str = draw(st.sampled_from(RUST_FENCES))
    body: list[tuple[bool, str]] = draw(
        st.lists(
            st.one_of(
                s_code_line().map(lambda s: (True, s)),
                s_hidden_line().map(lambda s: (False, s)),
            ),
            max_size=6,
        )
    )
    lines: list[str] = [fence, *(line for _, line in body), "```"]
    expected: list[str] = ["```rust", *(line for visible, line in body if visible), "```"]
    return lines, expected


@st.composite
def s_other_block(draw: Draw) -> Block:
    """A foreign-language code block; passes through unchanged, ``# `` lines included."""
    fence: str = draw(st.sampled_from(OTHER_FENCES))
    body: list[str] = draw(st.lists(st.one_of(s_code_line(), s_hidden_line()), max_size=6))
    lines: list[str] = [fence, *body, "```"]
    return lines, list(lines)


@st.composite
def s_document(draw: Draw, indent_headings: bool = True) -> Block:
    """A whole document made of prose and code blocks."""
    blocks: list[Block] = draw(
        st.lists(
            st.one_of(s_prose_block(indent_headings), s_rust_block(), s_other_block()),
            max_size=8,
        )
    )
    lines: list[str] = []
    expected: list[str] = []
    for block_lines, block_expected in blocks:
        lines.extend(block_lines)
        expected.extend(block_expected)
    return lines, expected


@st.composite
def s_canonical_document(draw: Draw) -> list[str]:
    """Documents already in their Markdown form: ``rust`` fences, no hidden lines."""
    blocks: list[list[str]] = draw(
        st.lists(
            st.one_of(
                st.lists(s_text_line(), min_size=1, max_size=5),
                st.lists(s_code_line(), max_size=5).map(lambda b: ["```rust", *b, "```"]),
                s_other_block().map(lambda block: block[0]),
            ),
            max_size=8,
        )
    )
    return [line for block in blocks for line in block]
