# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Load and parse the Rust files of a source tree using tree-sitter."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser, Tree

from libm_analyze.errors import LoadError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".rs",)


def rust_parser() -> Parser:
    """Create a tree-sitter parser for Rust."""
    rust_language = Language(tsrust.language())
    return Parser(rust_language)


@dataclass
class SourceUnit:
    """A parsed source file."""

    path: str  # relative to the root, POSIX form, e.g., "math/cos.rs"
    source: bytes
    tree: Tree

    @property
    def root_node(self) -> Node:
        return self.tree.root_node


@dataclass
class LoadResult:
    """Outcome of loading a source tree: every unit, or the first failure."""

    units: list[SourceUnit] = field(default_factory=list)
    error: LoadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[SourceUnit]:
        """Return the units, raising the recorded LoadError if loading failed."""
        if self.error is not None:
            raise self.error
        return self.units


class SourceLoader:
    """Walk a directory tree and parse every recognized source file."""

    def __init__(
        self,
        root: Path | str,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        parser: Parser | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            root: Directory holding the library sources.
            extensions: File suffixes to load, e.g., (".rs",).
            parser: Parser to use; a Rust parser is created if omitted.
        """
        self.root = Path(root)
        self.extensions = tuple(extensions)
        self.parser = parser or rust_parser()

    def discover(self) -> list[Path]:
        """Return matching files sorted by their path relative to the root."""
        files = [
            p for p in self.root.rglob("*") if p.is_file() and p.suffix in self.extensions
        ]
        return sorted(files, key=lambda p: p.relative_to(self.root).as_posix())

    def load(self) -> LoadResult:
        """Read and parse every matching file, stopping at the first failure."""
        if not self.root.is_dir():
            return LoadResult(error=LoadError(self.root, "source root is not a directory"))

        units: list[SourceUnit] = []
        for path in self.discover():
            try:
                units.append(self.load_file(path))
            except LoadError as e:
                logger.error(str(e))
                return LoadResult(error=e)

        logger.info(f"Loaded {len(units)} source files from {self.root}")
        return LoadResult(units=units)

    def load_file(self, path: Path) -> SourceUnit:
        """Parse a single file.

        Raises:
            LoadError: If the file is unreadable or has syntax errors.
        """
        try:
            content = path.read_bytes()
            content.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(path, f"unreadable: {e}") from e

        tree = self.parser.parse(content)
        if tree.root_node.has_error:
            bad = _first_error(tree.root_node)
            where = f"line {bad.start_point[0] + 1}" if bad is not None else "unknown location"
            raise LoadError(path, f"syntax error at {where}")

        try:
            rel = path.relative_to(self.root).as_posix()
        except ValueError:
            rel = path.as_posix()
        logger.debug(f"Parsed {rel}")
        return SourceUnit(path=rel, source=content, tree=tree)


def _first_error(node: Node) -> Node | None:
    """Find the first ERROR or missing node below `node`."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def load_sources(root: Path | str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> LoadResult:
    """Convenience wrapper around SourceLoader.load()."""
    return SourceLoader(root, tuple(extensions)).load()
