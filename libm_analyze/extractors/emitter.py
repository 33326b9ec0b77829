# libm-analyze - Signature catalog for libm code generators
# Copyright (c) 2025 Matt Varendorff
# https://github.com/mattyv/axiom
# SPDX-License-Identifier: BSL-1.0

"""Turn validated signatures into records for generation targets.

A target is any callable taking a CatalogRecord. One pass over the catalog
can feed several targets, e.g., a benchmark generator and a test generator:

    collector = RecordCollector()
    writer = TomlCatalogWriter(Path("catalog.toml"))
    CatalogEmitter().emit(catalog.signatures, collector, writer)
    writer.close()
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import toml

from libm_analyze.models import CatalogRecord, ValidatedSignature

logger = logging.getLogger(__name__)

GenerationTarget = Callable[[CatalogRecord], None]


def arg_ids(count: int) -> list[str]:
    """Synthesize positional parameter names: x0, x1, ..."""
    return [f"x{i}" for i in range(count)]


class CatalogEmitter:
    """Map signatures to records and stream them to generation targets."""

    def record(self, sig: ValidatedSignature) -> CatalogRecord:
        return CatalogRecord(
            id=sig.ident,
            api_kind=sig.api_kind,
            arg_tys=list(sig.arg_tys),
            arg_ids=arg_ids(len(sig.arg_tys)),
            ret_ty=sig.ret_ty,
        )

    def records(self, signatures: Iterable[ValidatedSignature]) -> Iterator[CatalogRecord]:
        """Yield one record per signature, in input order."""
        for sig in signatures:
            yield self.record(sig)

    def emit(self, signatures: Iterable[ValidatedSignature], *targets: GenerationTarget) -> int:
        """Send every record to every target.

        Returns:
            Number of records emitted.
        """
        count = 0
        for rec in self.records(signatures):
            for target in targets:
                target(rec)
            count += 1
        logger.info(f"Emitted {count} records to {len(targets)} target(s)")
        return count


class RecordCollector:
    """Target that keeps every record it receives."""

    def __init__(self) -> None:
        self.records: list[CatalogRecord] = []

    def __call__(self, record: CatalogRecord) -> None:
        self.records.append(record)


class _FileWriter:
    """Buffer records and write them out on close()."""

    def __init__(self, path: Path | None = None, source: str = "") -> None:
        self.path = Path(path) if path is not None else None
        self.source = source
        self.records: list[CatalogRecord] = []

    def __call__(self, record: CatalogRecord) -> None:
        self.records.append(record)

    def dumps(self) -> str:
        raise NotImplementedError

    def close(self) -> str:
        """Render the buffered records, writing them to `path` if set."""
        text = self.dumps()
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
            logger.info(f"Wrote {len(self.records)} records to {self.path}")
        return text


class TomlCatalogWriter(_FileWriter):
    """Write records as a TOML array of `[[functions]]` tables."""

    def dumps(self) -> str:
        data = {
            "version": "1.0",
            "source": self.source,
            "functions": [_record_dict(r) for r in self.records],
        }
        return toml.dumps(data)


class JsonCatalogWriter(_FileWriter):
    """Write records as a JSON document."""

    def dumps(self) -> str:
        data = {
            "version": "1.0",
            "source": self.source,
            "functions": [r.model_dump() for r in self.records],
        }
        return json.dumps(data, indent=2) + "\n"


def _record_dict(record: CatalogRecord) -> dict:
    # TOML has no null; a missing ret_ty means the function returns nothing
    return record.model_dump(exclude_none=True)


def load_records_toml(path: Path) -> list[CatalogRecord]:
    """Load records written by TomlCatalogWriter."""
    data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    return [CatalogRecord(**entry) for entry in data.get("functions", [])]
