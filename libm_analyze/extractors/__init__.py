# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Loading, extraction, validation and emission stages."""

from .categorizer import api_kind
from .emitter import (
    CatalogEmitter,
    GenerationTarget,
    JsonCatalogWriter,
    RecordCollector,
    TomlCatalogWriter,
    arg_ids,
    load_records_toml,
)
from .rust_signatures import ItemKind, RustSignatureExtractor, classify_item, type_node_from
from .source_loader import LoadResult, SourceLoader, SourceUnit, load_sources, rust_parser
from .type_whitelist import PRIMITIVE_TYPES, is_primitive, is_whitelisted
from .validator import ValidationEngine

__all__ = [
    "api_kind",
    "arg_ids",
    "CatalogEmitter",
    "classify_item",
    "GenerationTarget",
    "is_primitive",
    "is_whitelisted",
    "ItemKind",
    "JsonCatalogWriter",
    "load_records_toml",
    "load_sources",
    "LoadResult",
    "PRIMITIVE_TYPES",
    "RecordCollector",
    "rust_parser",
    "RustSignatureExtractor",
    "SourceLoader",
    "SourceUnit",
    "TomlCatalogWriter",
    "type_node_from",
    "ValidationEngine",
]
