# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Extract, validate and catalog the public API of libm."""

from .config import AnalyzeConfig, UnsafePolicy, load_config, parse_ignore_list
from .errors import (
    AnalyzeError,
    ConfigError,
    InvalidIdentifier,
    LoadError,
    StrictModeError,
)
from .pipeline import analyze, for_each_api

__all__ = [
    "analyze",
    "AnalyzeConfig",
    "AnalyzeError",
    "ConfigError",
    "for_each_api",
    "InvalidIdentifier",
    "load_config",
    "LoadError",
    "parse_ignore_list",
    "StrictModeError",
    "UnsafePolicy",
]
