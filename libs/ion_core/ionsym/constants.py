from __future__ import annotations

from typing import Final, Tuple

# Symbol ids
UNKNOWN_SID: Final[int] = -1

# Ion 1.0 system symbols (SIDs 1..9, in order)
ION: Final[str] = "$ion"
ION_1_0: Final[str] = "$ion_1_0"
ION_SYMBOL_TABLE: Final[str] = "$ion_symbol_table"
NAME: Final[str] = "name"
VERSION: Final[str] = "version"
IMPORTS: Final[str] = "imports"
SYMBOLS: Final[str] = "symbols"
MAX_ID: Final[str] = "max_id"
ION_SHARED_SYMBOL_TABLE: Final[str] = "$ion_shared_symbol_table"

SYSTEM_SYMBOLS: Final[Tuple[str, ...]] = (
    ION,
    ION_1_0,
    ION_SYMBOL_TABLE,
    NAME,
    VERSION,
    IMPORTS,
    SYMBOLS,
    MAX_ID,
    ION_SHARED_SYMBOL_TABLE,
)
SYSTEM_TABLE_NAME: Final[str] = ION
SYSTEM_TABLE_VERSION: Final[int] = 1

# Environment variables
ENV_CATALOG_PATH: Final[str] = "ION_CATALOG_PATH"        # JSON list of shared tables
ENV_STRICT_IMPORTS: Final[str] = "ION_STRICT_IMPORTS"    # 1/true/yes: no substitute tables

__all__ = [
    "UNKNOWN_SID",
    "ION",
    "ION_1_0",
    "ION_SYMBOL_TABLE",
    "NAME",
    "VERSION",
    "IMPORTS",
    "SYMBOLS",
    "MAX_ID",
    "ION_SHARED_SYMBOL_TABLE",
    "SYSTEM_SYMBOLS",
    "SYSTEM_TABLE_NAME",
    "SYSTEM_TABLE_VERSION",
    "ENV_CATALOG_PATH",
    "ENV_STRICT_IMPORTS",
]
