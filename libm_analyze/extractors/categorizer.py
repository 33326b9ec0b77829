# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Derive the API category tag of a function from its name."""

from libm_analyze.errors import InvalidIdentifier


def api_kind(ident: str) -> str:
    """Return the category tag for a function name.

    The first character is uppercased, the rest is kept: ``sin`` gives
    ``Sin`` and ``j0`` gives ``J0``. Generators match on the tag to
    special-case a family of functions.

    Raises:
        InvalidIdentifier: If the name is empty.
    """
    if not ident:
        raise InvalidIdentifier("cannot derive an API category from an empty identifier")
    return ident[0].upper() + ident[1:]
