# path: libs/ion_core/ionsym/value.py
"""Generic value contract shared by document tree nodes.

Every value carries a null flag, a lock flag set by make_read_only() and an
ordered list of annotations. Accessors on a null value raise
NullValueAccessError; mutators on a locked value raise ValueLockedError.
"""
from __future__ import annotations

import enum
from typing import List, Tuple

from .errors import NullValueAccessError, ValueLockedError


class IonType(str, enum.Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"
    SYMBOL = "symbol"
    STRING = "string"
    CLOB = "clob"
    BLOB = "blob"
    LIST = "list"
    SEXP = "sexp"
    STRUCT = "struct"
    DATAGRAM = "datagram"

    @property
    def is_container(self) -> bool:
        return self in (IonType.LIST, IonType.SEXP, IonType.STRUCT, IonType.DATAGRAM)


class IonValue:
    ion_type: IonType = IonType.NULL

    def __init__(self, is_null: bool):
        self._null = bool(is_null)
        self._locked = False
        self._annotations: List[str] = []

    @property
    def is_null(self) -> bool:
        return self._null

    @property
    def is_read_only(self) -> bool:
        return self._locked

    def make_read_only(self) -> None:
        self._locked = True

    def make_null(self) -> None:
        self._throw_if_locked()
        self._null = True

    @property
    def annotations(self) -> Tuple[str, ...]:
        return tuple(self._annotations)

    def add_annotation(self, text: str) -> None:
        self._throw_if_locked()
        if not isinstance(text, str):
            raise TypeError("annotation text must be a str")
        self._annotations.append(text)

    def clear_annotations(self) -> None:
        self._throw_if_locked()
        self._annotations.clear()

    def _throw_if_null(self) -> None:
        if self._null:
            raise NullValueAccessError(f"null.{self.ion_type.value} has no value")

    def _throw_if_locked(self) -> None:
        if self._locked:
            raise ValueLockedError(f"{self.ion_type.value} value is read-only")

    def is_equivalent_to(self, other: object) -> bool:
        """Type, null-ness and annotations; subclasses compare their payload."""
        if not isinstance(other, IonValue):
            return False
        if self.ion_type is not other.ion_type:
            return False
        if self._null != other.is_null:
            return False
        return tuple(self._annotations) == other.annotations

    def write_to(self, writer) -> None:
        for text in self._annotations:
            writer.add_type_annotation(text)
        self.write_body_to(writer)

    def write_body_to(self, writer) -> None:
        raise NotImplementedError


__all__ = ["IonType", "IonValue"]
