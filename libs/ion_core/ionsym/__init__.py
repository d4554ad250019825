"""
ionsym: symbol tables and exact decimal values for an Ion-style data format.

Exports symbol tokens and tables, the shared table catalog, the decimal
value types and the writer abstraction they serialize through.
"""
from .constants import UNKNOWN_SID, ION_1_0, SYSTEM_SYMBOLS
from .errors import (
    IonError,
    InvalidOperationError,
    ValueLockedError,
    NullValueAccessError,
    ImportResolutionError,
)
from .symbols import SymbolToken, UNKNOWN_SYMBOL
from .symtab import SymbolTable, TableKind, DeclaredSymbolNames, system_symbol_table
from .catalog import (
    Catalog,
    SimpleCatalog,
    SharedTableDoc,
    ImportDescriptor,
    resolve_import,
    build_local_table,
    create_catalog_from_env,
)
from .bigdecimal import BigDecimal
from .value import IonType, IonValue
from .ion_decimal import IonDecimal
from .writer import Annotated, IonWriter, TreeWriter
from .config import IonConfig

__all__ = [
    "UNKNOWN_SID",
    "ION_1_0",
    "SYSTEM_SYMBOLS",
    "IonError",
    "InvalidOperationError",
    "ValueLockedError",
    "NullValueAccessError",
    "ImportResolutionError",
    "SymbolToken",
    "UNKNOWN_SYMBOL",
    "SymbolTable",
    "TableKind",
    "DeclaredSymbolNames",
    "system_symbol_table",
    "Catalog",
    "SimpleCatalog",
    "SharedTableDoc",
    "ImportDescriptor",
    "resolve_import",
    "build_local_table",
    "create_catalog_from_env",
    "BigDecimal",
    "IonType",
    "IonValue",
    "IonDecimal",
    "Annotated",
    "IonWriter",
    "TreeWriter",
    "IonConfig",
]
