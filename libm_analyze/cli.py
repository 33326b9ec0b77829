# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Catalog the public C-ABI functions of a libm source tree.

Usage:
    # Print the catalog of libm/src as TOML
    libm-analyze crates/libm/src

    # Skip jnf, print diagnostics, write JSON
    libm-analyze crates/libm/src --ignore jnf --report \\
        --format json --output catalog.json

    # Fail when any declaration breaks a rule
    libm-analyze crates/libm/src --strict
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from libm_analyze.config import (
    AnalyzeConfig,
    UnsafePolicy,
    build_config,
    discover_config,
    load_config,
)
from libm_analyze.errors import ConfigError, LoadError, StrictModeError
from libm_analyze.extractors import CatalogEmitter, JsonCatalogWriter, TomlCatalogWriter
from libm_analyze.pipeline import analyze

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="libm-analyze",
        description="Extract and validate the public API of a libm source tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "root",
        type=Path,
        help="Source directory to scan",
    )
    parser.add_argument(
        "--ignore",
        type=str,
        help="Comma-separated function names to leave out (e.g., 'jnf,jn')",
    )
    parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        help="Source file extension (can be specified multiple times, default: .rs)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to .libm-analyze.toml (auto-discovered if not specified)",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Disable auto-discovery of .libm-analyze.toml files",
    )
    parser.add_argument(
        "--format",
        choices=("toml", "json"),
        default="toml",
        help="Catalog output format (default: toml)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        default=None,
        help="Print one diagnostic line per validation error",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with an error if any validation error was recorded",
    )
    parser.add_argument(
        "--allow-unsafe",
        action="store_true",
        help="Report `unsafe fn` declarations but keep them in the catalog",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> AnalyzeConfig:
    """Merge the config file (if any) with command line overrides."""
    overrides = {
        "root": args.root,
        "ignored": args.ignore,
        "extensions": args.extensions,
        "report_diagnostics": args.report,
        "strict": args.strict,
        "unsafe_policy": UnsafePolicy.WARN if args.allow_unsafe else None,
    }

    config_path = args.config
    if config_path is None and not args.no_config:
        config_path = discover_config(args.root)
        if config_path:
            logger.info(f"Discovered config at: {config_path}")

    if config_path is not None:
        return load_config(config_path, **overrides)
    return build_config(**overrides)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        catalog = analyze(config)
    except (ConfigError, LoadError) as e:
        logger.error(str(e))
        return 2
    except StrictModeError as e:
        logger.error(f"Strict mode: {e}")
        return 1

    writer_cls = JsonCatalogWriter if args.format == "json" else TomlCatalogWriter
    writer = writer_cls(args.output, source=str(config.root))
    CatalogEmitter().emit(catalog.signatures, writer)
    text = writer.close()
    if args.output is None:
        sys.stdout.write(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
