"""Pytest fixtures for libm-analyze tests."""

from pathlib import Path
from typing import Callable

import pytest

from libm_analyze.extractors.source_loader import SourceUnit, rust_parser

# Attributes every libm API function carries
LIBM_ATTRS = "#[inline]\n#[cfg_attr(all(test, assert_no_panic), no_panic::no_panic)]\n"


def libm_fn(signature: str, body: str = "0.0") -> str:
    """Render a well-formed libm API function with the standard attributes."""
    return f'{LIBM_ATTRS}pub extern "C" fn {signature} {{\n    {body}\n}}\n'


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create a source tree from a {relative path: contents} mapping."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def libm_tree(write_tree: Callable[[dict[str, str]], Path]) -> Path:
    """A small libm-like tree with valid and invalid declarations."""
    return write_tree(
        {
            "lib.rs": "#![no_std]\nmod math;\n",
            "math/cos.rs": libm_fn("cos(x: f64) -> f64", "x"),
            "math/scalbn.rs": libm_fn("scalbn(x: f64, n: i32) -> f64", "x"),
            "math/frexp.rs": libm_fn("frexp(x: f64) -> (f64, i32)", "(x, 0)"),
            "math/jnf.rs": libm_fn("jnf(n: i32, x: f32) -> f32", "x"),
            "math/sin.rs": (
                "#[inline]\n"
                "#[cfg_attr(all(test, assert_no_panic), no_panic::no_panic)]\n"
                "pub fn sin(x: f64) -> f64 {\n    x\n}\n"
            ),
            "math/modf.rs": libm_fn("modf(x: f64, iptr: *mut f64) -> f64", "x"),
            "math/README.md": "not rust",
        }
    )


@pytest.fixture
def rust_fn() -> Callable[..., str]:
    """Return the libm_fn renderer for tests that build their own sources."""
    return libm_fn


@pytest.fixture
def parse_unit() -> Callable[..., SourceUnit]:
    """Parse Rust source text into a SourceUnit."""
    parser = rust_parser()

    def _parse(text: str, path: str = "lib.rs") -> SourceUnit:
        source = text.encode("utf-8")
        return SourceUnit(path=path, source=source, tree=parser.parse(source))

    return _parse
