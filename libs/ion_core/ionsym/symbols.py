# path: libs/ion_core/ionsym/symbols.py
"""Symbol tokens: (text, sid) pairs returned by symbol table lookups."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import UNKNOWN_SID


@dataclass(frozen=True)
class SymbolToken:
    text: Optional[str] = None
    sid: int = UNKNOWN_SID

    def __post_init__(self) -> None:
        if self.text is not None and not isinstance(self.text, str):
            raise TypeError("symbol text must be a str or None")
        if self.sid < UNKNOWN_SID:
            raise ValueError(f"invalid symbol id: {self.sid}")

    @property
    def is_present(self) -> bool:
        return self.text is not None or self.sid != UNKNOWN_SID

    @property
    def has_sid(self) -> bool:
        return self.sid != UNKNOWN_SID


# Returned by Find on a miss; never an interned entry.
UNKNOWN_SYMBOL = SymbolToken(None, UNKNOWN_SID)

__all__ = ["SymbolToken", "UNKNOWN_SYMBOL"]
