# path: libs/ion_core/ionsym/symtab.py
"""Symbol tables: the text <-> SID mapping behind every encoded symbol.

One concrete class covers the four kinds of table:

- local: unnamed and unversioned, built on a system table plus shared
  imports, mutable until make_read_only()
- shared: named and versioned, read-only from construction
- system: the shared table predefined by the format ($ion, version 1)
- substitute: stands in for a shared import the catalog could not match
  exactly; it may know no symbol text at all

SID layout of a local table:
  [1, system.max_id]                 system symbols
  next import.max_id SIDs, per import imported symbols, in declared order
  (imported_max_id, max_id]           own declarations
"""
from __future__ import annotations

import enum
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .constants import (
    ION_1_0,
    ION_SYMBOL_TABLE,
    IMPORTS,
    MAX_ID,
    NAME,
    SYMBOLS,
    SYSTEM_SYMBOLS,
    SYSTEM_TABLE_NAME,
    SYSTEM_TABLE_VERSION,
    VERSION,
)
from .errors import InvalidOperationError
from .symbols import SymbolToken, UNKNOWN_SYMBOL
from .value import IonType

log = logging.getLogger("ionsym.symtab")

_DEFAULT_SYSTEM = object()


class TableKind(str, enum.Enum):
    LOCAL = "local"
    SHARED = "shared"
    SYSTEM = "system"
    SUBSTITUTE = "substitute"


class DeclaredSymbolNames:
    """Restartable iterable over a snapshot of a table's declared symbol names."""

    __slots__ = ("_names",)

    def __init__(self, names: Tuple[Optional[str], ...]):
        self._names = names

    def __iter__(self) -> Iterator[Optional[str]]:
        for text in self._names:
            yield text

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"DeclaredSymbolNames({list(self._names)!r})"


def _index_symbols(symbols: Iterable[Optional[str]], first_sid: int) -> Dict[str, int]:
    # duplicates resolve to the lowest SID
    index: Dict[str, int] = {}
    for offset, text in enumerate(symbols):
        if text is not None:
            index.setdefault(text, first_sid + offset)
    return index


def _check_symbols(symbols: Iterable[Optional[str]]) -> List[Optional[str]]:
    out: List[Optional[str]] = []
    for text in symbols:
        if text is not None and not isinstance(text, str):
            raise TypeError(f"symbol text must be str or None, got {type(text).__name__}")
        out.append(text)
    return out


class SymbolTable:
    """Maps symbol text to SIDs and back.

    Build instances with the ``local``, ``shared`` and ``substitute``
    factories or ``system_symbol_table()``; the constructor validates the
    kind-specific invariants.
    """

    def __init__(
        self,
        kind: TableKind,
        *,
        name: Optional[str] = None,
        version: Optional[int] = None,
        system: Optional["SymbolTable"] = None,
        imports: Sequence["SymbolTable"] = (),
        symbols: Iterable[Optional[str]] = (),
        max_id: Optional[int] = None,
        original: Optional["SymbolTable"] = None,
    ):
        self._kind = TableKind(kind)
        self._name = name
        self._version = version
        self._system = system
        self._imports: Tuple[SymbolTable, ...] = tuple(imports)
        self._original = original
        self._validate(max_id)

        offsets: List[int] = []
        running = system.max_id if system is not None else 0
        for table in self._imports:
            offsets.append(running)
            running += table.max_id
        self._import_offsets: Tuple[int, ...] = tuple(offsets)
        self._imported_max_id = running

        checked = _check_symbols(symbols)
        if self._kind is TableKind.SUBSTITUTE:
            checked = []
            self._substitute_max_id = int(max_id or 0)
        self._index = _index_symbols(checked, self._imported_max_id + 1)
        self._read_only = self._kind is not TableKind.LOCAL
        self._symbols: Union[List[Optional[str]], Tuple[Optional[str], ...]] = (
            checked if not self._read_only else tuple(checked)
        )

    def _validate(self, max_id: Optional[int]) -> None:
        if self._kind is TableKind.LOCAL:
            if self._name is not None or self._version is not None:
                raise ValueError("local symbol tables are unnamed and unversioned")
            if self._system is not None and not self._system.is_system:
                raise ValueError("system table of a local table must be a system table")
            for table in self._imports:
                if not isinstance(table, SymbolTable) or not table.is_shared or table.is_system:
                    raise ValueError("local table imports must be shared, non-system tables")
            return

        if not isinstance(self._name, str) or not self._name:
            raise ValueError(f"{self._kind.value} symbol tables require a non-empty name")
        if isinstance(self._version, bool) or not isinstance(self._version, int) or self._version < 1:
            raise ValueError(f"{self._kind.value} symbol tables require a version >= 1")
        if self._system is not None or self._imports:
            raise ValueError(f"{self._kind.value} symbol tables do not have imports")

        if self._kind is TableKind.SUBSTITUTE:
            if isinstance(max_id, bool) or not isinstance(max_id, int) or max_id < 0:
                raise ValueError("substitute tables require max_id >= 0")
            orig = self._original
            if orig is not None:
                if not orig.is_shared or orig.is_system:
                    raise ValueError("substitute original must be a shared, non-system table")
                if orig.name != self._name:
                    raise ValueError(f"substitute for {self._name!r} cannot wrap table {orig.name!r}")
        elif self._original is not None:
            raise ValueError("only substitute tables wrap an original table")

    # ----- factories -----

    @classmethod
    def local(
        cls,
        imports: Sequence["SymbolTable"] = (),
        *,
        system=_DEFAULT_SYSTEM,
        symbols: Iterable[Optional[str]] = (),
    ) -> "SymbolTable":
        """Local table over ``system`` (Ion 1.0 by default, None for none) and ``imports``.

        A system table passed as the first import becomes the table's system table.
        ``symbols`` pre-declares own symbols; None entries reserve a SID without text.
        """
        imports = list(imports)
        if imports and isinstance(imports[0], SymbolTable) and imports[0].is_system:
            system = imports.pop(0)
        elif system is _DEFAULT_SYSTEM:
            system = system_symbol_table()
        return cls(TableKind.LOCAL, system=system, imports=imports, symbols=symbols)

    @classmethod
    def shared(cls, name: str, version: int, symbols: Iterable[Optional[str]]) -> "SymbolTable":
        return cls(TableKind.SHARED, name=name, version=version, symbols=symbols)

    @classmethod
    def substitute(
        cls,
        name: str,
        version: int,
        max_id: int,
        original: Optional["SymbolTable"] = None,
    ) -> "SymbolTable":
        """Stand-in for an import with no exact catalog match.

        SIDs up to ``max_id`` resolve through ``original`` when it defines them,
        and to no text otherwise.
        """
        table = cls(TableKind.SUBSTITUTE, name=name, version=version, max_id=max_id, original=original)
        log.debug(
            "substitute table %s@%s max_id=%s (original=%s)",
            name,
            version,
            max_id,
            f"{original.name}@{original.version}" if original is not None else None,
        )
        return table

    # ----- attributes -----

    @property
    def kind(self) -> TableKind:
        return self._kind

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def version(self) -> Optional[int]:
        return self._version

    @property
    def is_local(self) -> bool:
        return self._kind is TableKind.LOCAL

    @property
    def is_shared(self) -> bool:
        return self._kind is not TableKind.LOCAL

    @property
    def is_system(self) -> bool:
        return self._kind is TableKind.SYSTEM

    @property
    def is_substitute(self) -> bool:
        return self._kind is TableKind.SUBSTITUTE

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    @property
    def ion_version_id(self) -> Optional[str]:
        if self._kind is TableKind.SYSTEM:
            return ION_1_0
        if self._kind is TableKind.LOCAL and self._system is not None:
            return self._system.ion_version_id
        return None

    @property
    def max_id(self) -> int:
        if self._kind is TableKind.SUBSTITUTE:
            return self._substitute_max_id
        return self._imported_max_id + len(self._symbols)

    @property
    def original(self) -> Optional["SymbolTable"]:
        return self._original

    def get_system_table(self) -> Optional["SymbolTable"]:
        return self._system if self._kind is TableKind.LOCAL else None

    def get_imported_tables(self) -> Tuple["SymbolTable", ...]:
        return self._imports

    def get_imported_max_id(self) -> int:
        return self._imported_max_id

    def make_read_only(self) -> None:
        if self._read_only:
            return
        self._symbols = tuple(self._symbols)
        self._read_only = True

    # ----- lookups -----

    def find(self, text: Optional[str]) -> SymbolToken:
        if text is None:
            return UNKNOWN_SYMBOL
        sid = self._index.get(text)
        if sid is not None:
            return SymbolToken(text, sid)
        if self._kind is TableKind.SUBSTITUTE:
            return self._find_in_original(text)
        for offset, table in zip(self._import_offsets, self._imports):
            token = table.find(text)
            if token.has_sid:
                return SymbolToken(text, offset + token.sid)
        if self._system is not None:
            token = self._system.find(text)
            if token.has_sid:
                return token
        return UNKNOWN_SYMBOL

    def _find_in_original(self, text: str) -> SymbolToken:
        if self._original is None:
            return UNKNOWN_SYMBOL
        token = self._original.find(text)
        if token.has_sid and token.sid <= self._substitute_max_id:
            return token
        return UNKNOWN_SYMBOL

    def find_symbol_id(self, text: Optional[str]) -> int:
        return self.find(text).sid

    def find_known_symbol(self, sid: int) -> Optional[str]:
        if isinstance(sid, bool) or not isinstance(sid, int):
            raise TypeError(f"symbol id must be an int, got {type(sid).__name__}")
        if sid <= 0 or sid > self.max_id:
            return None
        if self._kind is TableKind.SUBSTITUTE:
            return self._original.find_known_symbol(sid) if self._original is not None else None
        if self._system is not None and sid <= self._system.max_id:
            return self._system.find_known_symbol(sid)
        for offset, table in zip(self._import_offsets, self._imports):
            if sid <= offset + table.max_id:
                return table.find_known_symbol(sid - offset)
        return self._symbols[sid - self._imported_max_id - 1]

    def intern(self, text: str) -> SymbolToken:
        if text is None:
            raise ValueError("cannot intern a null symbol text")
        if not isinstance(text, str):
            raise TypeError(f"symbol text must be str, got {type(text).__name__}")
        token = self.find(text)
        if token.has_sid:
            return token
        if self._read_only:
            raise InvalidOperationError(f"cannot intern {text!r}: symbol table is read-only")
        sid = max(self.max_id, self._imported_max_id) + 1
        self._symbols.append(text)
        self._index[text] = sid
        return SymbolToken(text, sid)

    def get_declared_symbol_names(self) -> DeclaredSymbolNames:
        """Own symbol names in SID order, None where a SID has no text.

        The result is a snapshot: later interning does not show up in it.
        """
        if self._kind is TableKind.SUBSTITUTE:
            return DeclaredSymbolNames(
                tuple(self.find_known_symbol(sid) for sid in range(1, self._substitute_max_id + 1))
            )
        return DeclaredSymbolNames(tuple(self._symbols))

    # ----- serialization -----

    def write_to(self, writer) -> None:
        """Write this local table as an inline ``$ion_symbol_table`` struct.

        Imports are written as name/version/max_id references. Shared tables
        are resolved by name from a catalog and are never written inline.
        """
        if self._kind is not TableKind.LOCAL:
            raise InvalidOperationError(
                f"{self._kind.value} symbol table {self._name!r} is referenced by name, not written inline"
            )
        writer.add_type_annotation(ION_SYMBOL_TABLE)
        writer.step_in(IonType.STRUCT)
        if self._imports:
            writer.set_field_name(IMPORTS)
            writer.step_in(IonType.LIST)
            for table in self._imports:
                writer.step_in(IonType.STRUCT)
                writer.set_field_name(NAME)
                writer.write_string(table.name)
                writer.set_field_name(VERSION)
                writer.write_int(table.version)
                writer.set_field_name(MAX_ID)
                writer.write_int(table.max_id)
                writer.step_out()
            writer.step_out()
        if self._symbols:
            writer.set_field_name(SYMBOLS)
            writer.step_in(IonType.LIST)
            for text in tuple(self._symbols):
                writer.write_string(text)
            writer.step_out()
        writer.step_out()

    def __repr__(self) -> str:
        if self._kind is TableKind.LOCAL:
            return f"<SymbolTable local max_id={self.max_id} imports={len(self._imports)}>"
        return f"<SymbolTable {self._kind.value} {self._name}@{self._version} max_id={self.max_id}>"


_SYSTEM_TABLE = SymbolTable(
    TableKind.SYSTEM,
    name=SYSTEM_TABLE_NAME,
    version=SYSTEM_TABLE_VERSION,
    symbols=SYSTEM_SYMBOLS,
)


def system_symbol_table() -> SymbolTable:
    """Return the shared Ion 1.0 system symbol table."""
    return _SYSTEM_TABLE


__all__ = [
    "TableKind",
    "SymbolTable",
    "DeclaredSymbolNames",
    "system_symbol_table",
]
