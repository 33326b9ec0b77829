# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Configuration for an analysis run.

Settings come from a ``.libm-analyze.toml`` file (an ``[analyze]`` table)
discovered next to the source tree, overridden by command line flags.

Example::

    [analyze]
    root = "src"
    ignored = "jnf,jn"
    report_diagnostics = true
    strict = false
"""

from __future__ import annotations

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

import pydantic
from pydantic import BaseModel, Field, field_validator

from libm_analyze.errors import ConfigError

CONFIG_FILENAME = ".libm-analyze.toml"


class UnsafePolicy(str, Enum):
    """How `unsafe fn` declarations are treated."""

    EXCLUDE = "exclude"  # IsUnsafe excludes the function like any other rule
    WARN = "warn"  # IsUnsafe is reported but the function is kept


def parse_ignore_list(value: str | None) -> set[str]:
    """Split a comma-delimited ignore string into identifiers.

    >>> sorted(parse_ignore_list("jnf, jn"))
    ['jn', 'jnf']
    """
    if not value:
        return set()
    return {name.strip() for name in value.split(",") if name.strip()}


class AnalyzeConfig(BaseModel):
    """Options threaded through one pipeline run."""

    root: Path = Path(".")
    extensions: list[str] = Field(default_factory=lambda: [".rs"])
    ignored: set[str] = Field(default_factory=set)
    foreign_abi: str = "C"
    inline_marker: str = "inline"
    no_panic_marker: str = "no_panic"
    unsafe_policy: UnsafePolicy = UnsafePolicy.EXCLUDE
    report_diagnostics: bool = False
    strict: bool = False

    @field_validator("ignored", mode="before")
    @classmethod
    def _split_ignored(cls, value: Any) -> Any:
        if value is None:
            return set()
        if isinstance(value, str):
            return parse_ignore_list(value)
        return value

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

    @field_validator("extensions")
    @classmethod
    def _require_extensions(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one source extension is required")
        return value


def discover_config(source_path: Path) -> Path | None:
    """Look for .libm-analyze.toml in the source directory or its parents.

    Walks up to 3 parent levels. The closest file takes precedence.

    Args:
        source_path: Source tree root or a file inside it.

    Returns:
        Path to the config file if found, None otherwise.
    """
    path = source_path if source_path.is_dir() else source_path.parent

    for parent in [path] + list(path.parents)[:3]:
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    return None


def load_config(path: Path, **overrides: Any) -> AnalyzeConfig:
    """Load configuration from a TOML file.

    Args:
        path: Config file to read.
        **overrides: Values that take precedence over the file (None is ignored).

    Returns:
        Validated AnalyzeConfig. A relative root resolves against the
        file's directory.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    section = data.get("analyze", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [analyze] must be a table")

    if "root" in section:
        root = Path(section["root"])
        if not root.is_absolute():
            section["root"] = path.parent / root

    return build_config(section, **overrides)


def build_config(values: dict[str, Any] | None = None, **overrides: Any) -> AnalyzeConfig:
    """Build a config from plain values, applying non-None overrides."""
    merged = dict(values or {})
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return AnalyzeConfig(**merged)
    except pydantic.ValidationError as e:
        raise ConfigError(str(e)) from e


__all__ = [
    "AnalyzeConfig",
    "CONFIG_FILENAME",
    "UnsafePolicy",
    "build_config",
    "discover_config",
    "load_config",
    "parse_ignore_list",
]
