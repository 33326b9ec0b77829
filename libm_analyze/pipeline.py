# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Run the full load → extract → validate → emit pass over a source tree."""

from __future__ import annotations

import logging
from typing import TextIO

from libm_analyze.config import AnalyzeConfig
from libm_analyze.errors import StrictModeError
from libm_analyze.extractors import (
    CatalogEmitter,
    GenerationTarget,
    RustSignatureExtractor,
    SourceLoader,
    ValidationEngine,
)
from libm_analyze.models import Catalog

logger = logging.getLogger(__name__)


def analyze(config: AnalyzeConfig, stream: TextIO | None = None) -> Catalog:
    """Build the catalog for the tree at ``config.root``.

    Args:
        config: Run options.
        stream: Diagnostic output when ``config.report_diagnostics`` is set.

    Returns:
        The catalog, with every recorded validation error.

    Raises:
        LoadError: If any source file is unreadable or unparsable. Nothing
            is extracted in that case.
        StrictModeError: If ``config.strict`` is set and any error was recorded.
    """
    loaded = SourceLoader(config.root, config.extensions).load()
    if loaded.error is not None:
        raise loaded.error

    extractor = RustSignatureExtractor(ignored=config.ignored)
    candidates = extractor.extract_all(loaded.units)

    engine = ValidationEngine(config, stream=stream)
    catalog = engine.validate(candidates, source=str(config.root))

    if catalog.errors:
        functions = len({e.identifier for e in catalog.errors})
        logger.warning(f"{len(catalog.errors)} validation errors in {functions} functions")
        if config.strict:
            raise StrictModeError(catalog.errors)

    return catalog


def for_each_api(
    config: AnalyzeConfig,
    *targets: GenerationTarget,
    stream: TextIO | None = None,
) -> Catalog:
    """Analyze the tree and hand one record per public API to each target."""
    catalog = analyze(config, stream=stream)
    CatalogEmitter().emit(catalog.signatures, *targets)
    return catalog


__all__ = ["analyze", "for_each_api"]
