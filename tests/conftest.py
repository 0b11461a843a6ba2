# topmark:header:start
#
#   project      : ReadMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ReadMark test suite.

This file sets up global fixtures (crate scaffolding under ``tmp_path``) and
customizes the logging configuration for test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from readmark.config import logging

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_readmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ReadMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``READMARK_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so every code path emits its log records."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


CARGO_TOML_DEFAULT = """\
[package]
name = "my-crate"
version = "0.1.0"
license = "MIT"
"""

CrateFactory = Callable[..., "Path"]


def write_crate(
    root: Path,
    *,
    cargo_toml: str = CARGO_TOML_DEFAULT,
    files: Mapping[str, str] | None = None,
) -> Path:
    """Create a crate skeleton under ``root``.

    Args:
        root (Path): Directory to populate (created if missing).
        cargo_toml (str): Content of ``Cargo.toml``.
        files (Mapping[str, str] | None): Extra files, keyed by path relative to ``root``.

    Returns:
        Path: ``root``.
    """
    root.mkdir(parents=True, exist_ok=True)
    (root / "Cargo.toml").write_text(cargo_toml, encoding="utf-8")
    for relpath, content in (files or {}).items():
        path: Path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_crate(tmp_path: Path) -> CrateFactory:
    """Return a factory creating crate skeletons inside ``tmp_path``.

    The factory accepts the keyword arguments of `write_crate` plus an optional
    ``name`` for the crate directory (default ``"crate"``).
    """

    def _make(name: str = "crate", **kwargs: Any) -> Path:
        return write_crate(tmp_path / name, **kwargs)

    return _make
