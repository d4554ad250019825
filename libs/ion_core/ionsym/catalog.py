# path: libs/ion_core/ionsym/catalog.py
"""Shared symbol table catalog and import resolution.

A local table imports shared tables by (name, version, max_id). The catalog
supplies the tables; when it has no exact match the import is satisfied by a
substitute table so decoding can go on with partial symbol text.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import orjson
from pydantic import BaseModel, Field

from .config import IonConfig
from .errors import ImportResolutionError
from .symtab import SymbolTable

log = logging.getLogger("ionsym.catalog")


class SharedTableDoc(BaseModel):
    name: str = Field(..., min_length=1, description="Shared table name")
    version: int = Field(1, ge=1, description="Shared table version")
    symbols: List[Optional[str]] = Field(default_factory=list)

    def to_table(self) -> SymbolTable:
        return SymbolTable.shared(self.name, self.version, self.symbols)


class ImportDescriptor(BaseModel):
    name: str = Field(..., min_length=1)
    version: int = Field(1, ge=1)
    max_id: Optional[int] = Field(None, ge=0)


class Catalog:
    def get_table(self, name: str, version: Optional[int] = None) -> Optional[SymbolTable]:
        raise NotImplementedError


def _best_version(requested: int, available: Iterable[int]) -> Optional[int]:
    # exact, else the highest version below the request, else the lowest above
    below = [v for v in available if v <= requested]
    if below:
        return max(below)
    above = [v for v in available if v > requested]
    return min(above) if above else None


class SimpleCatalog(Catalog):
    def __init__(self, tables: Iterable[SymbolTable] = ()):
        self._tables: Dict[str, Dict[int, SymbolTable]] = {}
        for table in tables:
            self.put_table(table)

    def put_table(self, table: SymbolTable) -> None:
        if not table.is_shared or table.is_system or table.is_substitute:
            raise ValueError("catalogs hold shared, non-system, non-substitute tables")
        self._tables.setdefault(table.name, {})[table.version] = table

    def remove_table(self, name: str, version: int) -> Optional[SymbolTable]:
        versions = self._tables.get(name)
        if not versions:
            return None
        removed = versions.pop(version, None)
        if not versions:
            del self._tables[name]
        return removed

    def get_table(self, name: str, version: Optional[int] = None) -> Optional[SymbolTable]:
        versions = self._tables.get(name)
        if not versions:
            return None
        if version is None:
            return versions[max(versions)]
        best = _best_version(version, versions.keys())
        return versions[best] if best is not None else None

    def __iter__(self) -> Iterator[SymbolTable]:
        for name in sorted(self._tables):
            versions = self._tables[name]
            for version in sorted(versions):
                yield versions[version]

    def __len__(self) -> int:
        return sum(len(v) for v in self._tables.values())

    def load_file(self, path: Union[str, Path]) -> int:
        """Register the shared tables listed in a JSON file; returns the count."""
        raw = orjson.loads(Path(path).read_bytes())
        if isinstance(raw, dict):
            raw = [raw]
        docs = [SharedTableDoc.model_validate(item) for item in raw]
        for doc in docs:
            self.put_table(doc.to_table())
        log.debug("loaded %d shared tables from %s", len(docs), path)
        return len(docs)


def resolve_import(
    catalog: Catalog,
    name: str,
    version: int = 1,
    max_id: Optional[int] = None,
    *,
    strict: Optional[bool] = None,
) -> SymbolTable:
    """Resolve one import to a catalog table or a substitute for it."""
    if strict is None:
        strict = IonConfig.from_env().strict_imports
    if version is None or version < 1:
        version = 1

    table = catalog.get_table(name, version)
    exact = table is not None and table.version == version
    if exact and (max_id is None or max_id == table.max_id):
        return table

    if max_id is None:
        raise ImportResolutionError(
            f"import of {name}@{version} has no max_id and the catalog has no exact match"
        )
    if strict:
        raise ImportResolutionError(f"no exact match for import {name}@{version} max_id={max_id}")

    log.info(
        "import %s@%s max_id=%s resolved to a substitute (closest: %s)",
        name,
        version,
        max_id,
        f"{table.name}@{table.version}" if table is not None else None,
    )
    return SymbolTable.substitute(name, version, max_id, original=table)


ImportSpec = Union[ImportDescriptor, Tuple, dict]


def _descriptor(spec: ImportSpec) -> ImportDescriptor:
    if isinstance(spec, ImportDescriptor):
        return spec
    if isinstance(spec, dict):
        return ImportDescriptor.model_validate(spec)
    fields = ("name", "version", "max_id")
    return ImportDescriptor.model_validate(dict(zip(fields, spec)))


def build_local_table(
    catalog: Catalog,
    imports: Sequence[ImportSpec] = (),
    symbols: Iterable[Optional[str]] = (),
    *,
    strict: Optional[bool] = None,
) -> SymbolTable:
    """Local table whose imports are resolved through ``catalog``."""
    resolved = []
    for spec in imports:
        d = _descriptor(spec)
        resolved.append(resolve_import(catalog, d.name, d.version, d.max_id, strict=strict))
    return SymbolTable.local(resolved, symbols=symbols)


def create_catalog_from_env() -> SimpleCatalog:
    cfg = IonConfig.from_env()
    catalog = SimpleCatalog()
    if cfg.catalog_path is not None:
        catalog.load_file(cfg.catalog_path)
    return catalog


__all__ = [
    "Catalog",
    "SimpleCatalog",
    "SharedTableDoc",
    "ImportDescriptor",
    "resolve_import",
    "build_local_table",
    "create_catalog_from_env",
]
