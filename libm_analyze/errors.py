# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Exceptions raised by the analysis pipeline.

Validation failures are not exceptions: they are collected as
``ValidationError`` records on the catalog. The classes here cover the
conditions that stop a run.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libm_analyze.models import ValidationError


class AnalyzeError(Exception):
    """Base class for all libm-analyze failures."""


class LoadError(AnalyzeError):
    """A source file could not be read or parsed.

    Fatal: a malformed source tree invalidates the whole extraction.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"failed to load {self.path}: {reason}")


class InvalidIdentifier(ValueError, AnalyzeError):
    """An empty identifier reached categorization."""


class ConfigError(AnalyzeError):
    """The configuration file or values are invalid."""


class StrictModeError(AnalyzeError):
    """Validation recorded errors while strict mode was enabled."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        names = sorted({e.identifier for e in self.errors})
        super().__init__(
            f"{len(self.errors)} validation error(s) in {len(names)} function(s): "
            + ", ".join(names)
        )


__all__ = [
    "AnalyzeError",
    "ConfigError",
    "InvalidIdentifier",
    "LoadError",
    "StrictModeError",
]
