# path: libs/ion_core/ionsym/errors.py
"""Exceptions raised by the symbol table and value layers.

Lookup misses are never errors: they come back as ``UNKNOWN_SYMBOL``,
``UNKNOWN_SID`` or ``None``.
"""
from __future__ import annotations


class IonError(Exception):
    pass


class InvalidOperationError(IonError):
    """Operation not allowed in the object's current state (e.g. interning into a read-only table)."""


class ValueLockedError(InvalidOperationError):
    """Mutation of a value after make_read_only()."""


class NullValueAccessError(IonError):
    """Accessor called on a null value."""


class ImportResolutionError(IonError):
    """Shared table import that can be neither matched nor substituted."""


__all__ = [
    "IonError",
    "InvalidOperationError",
    "ValueLockedError",
    "NullValueAccessError",
    "ImportResolutionError",
]
