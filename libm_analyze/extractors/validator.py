# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Validate function candidates against the libm API rules.

Every rule is checked for every candidate so that all problems with a
declaration are reported at once. A candidate with any error is left out
of the catalog; the errors are kept on the catalog for reporting.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from libm_analyze.config import AnalyzeConfig, UnsafePolicy
from libm_analyze.extractors.categorizer import api_kind
from libm_analyze.extractors.type_whitelist import is_whitelisted
from libm_analyze.models import (
    Catalog,
    ErrorKind,
    FunctionCandidate,
    ValidatedSignature,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Apply the rule set to candidates and build the catalog."""

    def __init__(
        self,
        config: AnalyzeConfig | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            config: Markers, ABI tag and unsafe policy. Defaults apply if omitted.
            stream: Where diagnostics go when reporting is on (default: stderr).
        """
        self.config = config or AnalyzeConfig()
        self.stream = stream

    def validate(
        self,
        candidates: Iterable[FunctionCandidate],
        report: bool | None = None,
        source: str = "",
    ) -> Catalog:
        """Validate candidates in order.

        Args:
            candidates: Candidates in discovery order.
            report: Print one diagnostic line per error. Falls back to
                ``config.report_diagnostics``.
            source: Label stored on the catalog, usually the source root.

        Returns:
            Catalog of the passing signatures plus every recorded error.
        """
        if report is None:
            report = self.config.report_diagnostics

        catalog = Catalog(source=source)
        for candidate in candidates:
            errors = self.check(candidate)
            if report:
                for error in errors:
                    print(error.render(), file=self.stream or sys.stderr)
            catalog.errors.extend(errors)

            if self._excluded(errors):
                logger.debug(f"Excluded {candidate.ident}: {[e.kind.value for e in errors]}")
                continue

            catalog.signatures.append(
                ValidatedSignature(
                    ident=candidate.ident,
                    api_kind=api_kind(candidate.ident),
                    arg_tys=[p.text for p in candidate.params],
                    ret_ty=candidate.ret.text if candidate.ret is not None else None,
                )
            )

        logger.info(
            f"Validated {len(catalog.signatures)} signatures, "
            f"{len(catalog.errors)} errors recorded"
        )
        return catalog

    def check(self, candidate: FunctionCandidate) -> list[ValidationError]:
        """Run every rule on one candidate and return all violations."""
        errors: list[ValidationError] = []

        def err(kind: ErrorKind, message: str) -> None:
            errors.append(ValidationError(kind=kind, identifier=candidate.ident, message=message))

        abi = self.config.foreign_abi
        if candidate.linkage != abi:
            err(ErrorKind.NOT_FOREIGN_ABI, f'not `extern "{abi}"`')

        if candidate.qualifiers.is_const:
            err(ErrorKind.IS_CONST, "is const")
        if candidate.qualifiers.is_async:
            err(ErrorKind.IS_ASYNC, "is async")
        if candidate.qualifiers.is_unsafe:
            err(ErrorKind.IS_UNSAFE, "is unsafe")

        if candidate.variadic is not None:
            err(ErrorKind.HAS_VARIADIC, f'contains variadic arguments "{candidate.variadic}"')

        generics = candidate.generics
        if generics.type_params:
            err(ErrorKind.HAS_GENERIC_TYPE_PARAM, f'contains generic parameters "{generics.text}"')
        if generics.lifetime_params:
            err(ErrorKind.HAS_LIFETIME_PARAM, f'contains lifetime parameters "{generics.text}"')
        if generics.const_params:
            err(ErrorKind.HAS_CONST_PARAM, f'contains const parameters "{generics.text}"')

        inline = self.config.inline_marker
        no_panic = self.config.no_panic_marker
        attrs = ",".join(candidate.attrs)
        if not candidate.attrs or inline not in attrs:
            err(ErrorKind.MISSING_INLINE_MARKER, f"missing `#[{inline}]` attribute")
        if no_panic not in attrs:
            err(ErrorKind.MISSING_NO_PANIC_MARKER, f"missing `#[{no_panic}]` attribute")

        if candidate.ret is not None and not is_whitelisted(candidate.ret):
            err(ErrorKind.UNSUPPORTED_RETURN_TYPE, f"returns unsupported type -> {candidate.ret}")
        for param in candidate.params:
            if not is_whitelisted(param):
                err(ErrorKind.UNSUPPORTED_ARG_TYPE, f"takes unsupported argument type {param}")

        return errors

    def _excluded(self, errors: list[ValidationError]) -> bool:
        """Decide whether the recorded errors keep a candidate out of the catalog."""
        if self.config.unsafe_policy == UnsafePolicy.WARN:
            return any(e.kind != ErrorKind.IS_UNSAFE for e in errors)
        return bool(errors)
