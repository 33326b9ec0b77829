# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Types allowed in the signature of a catalogued function."""

from libm_analyze.models import TypeKind, TypeNode

PRIMITIVE_TYPES = frozenset(
    {
        "i8", "i16", "i32", "i64", "isize",
        "u8", "u16", "u32", "u64", "usize",
        "f32", "f64",
    }
)


def is_primitive(ty: TypeNode) -> bool:
    """True for a fixed-width numeric type written as a single path segment."""
    return (
        ty.kind in (TypeKind.PRIMITIVE, TypeKind.PATH)
        and ty.segments == 1
        and ty.text in PRIMITIVE_TYPES
    )


def is_whitelisted(ty: TypeNode) -> bool:
    """Check a parameter or return type against the whitelist.

    Accepts a numeric primitive, or a raw pointer (`*const T` / `*mut T`)
    whose pointee is a numeric primitive. Only one level of indirection is
    allowed.
    """
    if ty.kind == TypeKind.POINTER:
        return ty.pointee is not None and is_primitive(ty.pointee)
    return is_primitive(ty)
