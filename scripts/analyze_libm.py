#!/usr/bin/env python3
# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Catalog the public C-ABI functions of a libm source tree.

Usage:
    python scripts/analyze_libm.py crates/libm/src --ignore jnf --report
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from libm_analyze.cli import main

if __name__ == "__main__":
    sys.exit(main())
