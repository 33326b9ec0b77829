# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Data models for the libm signature catalog."""

from .signature import (
    Catalog,
    CatalogRecord,
    ErrorKind,
    FunctionCandidate,
    GenericCounts,
    Qualifiers,
    TypeKind,
    TypeNode,
    ValidatedSignature,
    ValidationError,
)

__all__ = [
    "Catalog",
    "CatalogRecord",
    "ErrorKind",
    "FunctionCandidate",
    "GenericCounts",
    "Qualifiers",
    "TypeKind",
    "TypeNode",
    "ValidatedSignature",
    "ValidationError",
]
