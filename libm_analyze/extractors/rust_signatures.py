# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Extract public function declarations from parsed Rust sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from tree_sitter import Node

from libm_analyze.extractors.source_loader import SourceUnit
from libm_analyze.models import (
    FunctionCandidate,
    GenericCounts,
    Qualifiers,
    TypeKind,
    TypeNode,
)

logger = logging.getLogger(__name__)

# Extras that may sit between an item and its attributes
_COMMENT_NODES = {"line_comment", "block_comment"}

# type_parameters children across tree-sitter-rust grammar versions
_LIFETIME_PARAM_NODES = {"lifetime", "lifetime_parameter"}
_TYPE_PARAM_NODES = {
    "type_identifier",
    "type_parameter",
    "constrained_type_parameter",
    "optional_type_parameter",
}


class ItemKind(str, Enum):
    """Top-level item shapes the extractor distinguishes."""

    FUNCTION = "function"
    OTHER = "other"


def classify_item(node: Node) -> ItemKind:
    """Map a top-level syntax node to an item kind."""
    if node.type == "function_item":
        return ItemKind.FUNCTION
    return ItemKind.OTHER


class RustSignatureExtractor:
    """Build FunctionCandidates from the top-level items of Rust files."""

    def __init__(self, ignored: Iterable[str] | None = None) -> None:
        """Initialize extractor.

        Args:
            ignored: Function names to drop before validation.
        """
        self.ignored = frozenset(ignored or ())

    def extract_all(self, units: Iterable[SourceUnit]) -> list[FunctionCandidate]:
        """Extract candidates from every unit, preserving unit order."""
        candidates: list[FunctionCandidate] = []
        for unit in units:
            candidates.extend(self.extract(unit))
        logger.info(f"Extracted {len(candidates)} public function candidates")
        return candidates

    def extract(self, unit: SourceUnit) -> list[FunctionCandidate]:
        """Extract candidates from a single unit in declaration order."""
        candidates: list[FunctionCandidate] = []
        for node, attrs in self._items_with_attrs(unit.root_node, unit.source):
            if classify_item(node) is not ItemKind.FUNCTION:
                continue
            if not self._is_public(node, unit.source):
                continue
            candidate = self._build_candidate(node, attrs, unit)
            if candidate.ident in self.ignored:
                logger.debug(f"Ignoring {candidate.ident} ({unit.path})")
                continue
            candidates.append(candidate)
        return candidates

    def _items_with_attrs(
        self, root: Node, content: bytes
    ) -> Iterator[tuple[Node, list[str]]]:
        """Pair each top-level item with the outer attributes written above it."""
        pending: list[str] = []
        for child in root.children:
            if child.type == "attribute_item":
                pending.append(_text(child, content))
                continue
            if child.type in _COMMENT_NODES:
                continue
            yield child, pending
            pending = []

    def _is_public(self, node: Node, content: bytes) -> bool:
        """True for plain `pub`; restricted forms like `pub(crate)` do not count."""
        for child in node.children:
            if child.type == "visibility_modifier":
                return _text(child, content) == "pub"
        return False

    def _build_candidate(
        self, node: Node, attrs: list[str], unit: SourceUnit
    ) -> FunctionCandidate:
        content = unit.source
        name_node = node.child_by_field_name("name")
        ident = _text(name_node, content) if name_node is not None else ""

        linkage, qualifiers = self._modifiers(node, content)

        generics = GenericCounts()
        type_params = node.child_by_field_name("type_parameters")
        if type_params is not None:
            generics = self._generics(type_params, content)

        params: list[TypeNode] = []
        variadic: str | None = None
        param_list = node.child_by_field_name("parameters")
        if param_list is not None:
            for child in param_list.named_children:
                if child.type == "variadic_parameter":
                    variadic = _text(child, content)
                elif child.type == "attribute_item" or child.type in _COMMENT_NODES:
                    continue
                elif child.type == "parameter":
                    type_node = child.child_by_field_name("type")
                    params.append(
                        type_node_from(type_node, content)
                        if type_node is not None
                        else _other(child, content)
                    )
                elif child.type == "self_parameter":
                    params.append(_other(child, content))
                else:
                    # Pattern-less parameter, e.g., `fn f(f64)`
                    params.append(type_node_from(child, content))

        ret: TypeNode | None = None
        ret_node = node.child_by_field_name("return_type")
        if ret_node is not None:
            ret = type_node_from(ret_node, content)

        return FunctionCandidate(
            ident=ident,
            linkage=linkage,
            qualifiers=qualifiers,
            attrs=list(attrs),
            generics=generics,
            variadic=variadic,
            params=params,
            ret=ret,
            file=unit.path,
            line=node.start_point[0] + 1,
        )

    def _modifiers(self, node: Node, content: bytes) -> tuple[str | None, Qualifiers]:
        """Read `const`, `async`, `unsafe` and the `extern "ABI"` string."""
        qualifiers = Qualifiers()
        linkage: str | None = None
        for child in node.children:
            if child.type != "function_modifiers":
                continue
            for modifier in child.children:
                if modifier.type == "const":
                    qualifiers.is_const = True
                elif modifier.type == "async":
                    qualifiers.is_async = True
                elif modifier.type == "unsafe":
                    qualifiers.is_unsafe = True
                elif modifier.type == "extern_modifier":
                    for part in modifier.children:
                        if part.type in ("string_literal", "raw_string_literal"):
                            linkage = _string_value(_text(part, content))
        return linkage, qualifiers

    def _generics(self, type_params: Node, content: bytes) -> GenericCounts:
        counts = GenericCounts(text=_text(type_params, content))
        for child in type_params.named_children:
            if child.type in _LIFETIME_PARAM_NODES:
                counts.lifetime_params += 1
            elif child.type == "const_parameter":
                counts.const_params += 1
            elif child.type in _TYPE_PARAM_NODES:
                left = child.child_by_field_name("left")
                if left is not None and left.type == "lifetime":
                    counts.lifetime_params += 1
                else:
                    counts.type_params += 1
        return counts


def type_node_from(node: Node, content: bytes) -> TypeNode:
    """Convert a tree-sitter type node into a TypeNode."""
    text = _text(node, content)
    kind = node.type

    if kind == "primitive_type":
        return TypeNode(kind=TypeKind.PRIMITIVE, text=text)
    if kind == "type_identifier":
        return TypeNode(kind=TypeKind.PATH, text=text)
    if kind == "scoped_type_identifier":
        return TypeNode(kind=TypeKind.PATH, text=text, segments=text.count("::") + 1)
    if kind in ("pointer_type", "reference_type"):
        inner = node.child_by_field_name("type")
        return TypeNode(
            kind=TypeKind.POINTER if kind == "pointer_type" else TypeKind.REFERENCE,
            text=text,
            mutable=any(c.type == "mutable_specifier" for c in node.children),
            pointee=type_node_from(inner, content) if inner is not None else None,
        )
    if kind == "array_type":
        has_length = node.child_by_field_name("length") is not None
        return TypeNode(kind=TypeKind.ARRAY if has_length else TypeKind.SLICE, text=text)
    if kind in ("tuple_type", "unit_type"):
        return TypeNode(kind=TypeKind.TUPLE, text=text)
    return TypeNode(kind=TypeKind.OTHER, text=text)


def _other(node: Node, content: bytes) -> TypeNode:
    return TypeNode(kind=TypeKind.OTHER, text=_text(node, content))


def _text(node: Node, content: bytes) -> str:
    """Source text of a node with whitespace runs collapsed."""
    raw = content[node.start_byte : node.end_byte].decode("utf-8")
    return " ".join(raw.split())


def _string_value(literal: str) -> str:
    """Strip the quotes from a string literal like "C" or r"C"."""
    if literal.startswith("r"):
        literal = literal[1:].strip("#")
    return literal[1:-1] if len(literal) >= 2 else literal
