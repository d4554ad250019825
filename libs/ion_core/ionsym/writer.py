# path: libs/ion_core/ionsym/writer.py
"""Writer abstraction consumed by the core, plus an in-memory implementation.

Symbol tables and values never serialize bytes themselves: they call an
``IonWriter``. ``TreeWriter`` records the calls as plain Python values
(dict, list, str, int, Decimal, None) so they can be inspected.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .bigdecimal import BigDecimal
from .errors import InvalidOperationError
from .value import IonType


@dataclass(frozen=True)
class Annotated:
    annotations: Tuple[str, ...]
    value: Any


class IonWriter:
    def write_null(self, ion_type: IonType) -> None:
        raise NotImplementedError

    def write_decimal(self, value: BigDecimal) -> None:
        raise NotImplementedError

    def write_string(self, text: Optional[str]) -> None:
        raise NotImplementedError

    def write_int(self, value: int) -> None:
        raise NotImplementedError

    def set_field_name(self, name: str) -> None:
        raise NotImplementedError

    def add_type_annotation(self, text: str) -> None:
        raise NotImplementedError

    def step_in(self, ion_type: IonType) -> None:
        raise NotImplementedError

    def step_out(self) -> None:
        raise NotImplementedError


class TreeWriter(IonWriter):
    def __init__(self):
        self.values: List[Any] = []
        self._stack: List[Tuple[IonType, Any]] = []
        self._field_name: Optional[str] = None
        self._annotations: List[str] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _emit(self, value: Any) -> None:
        if self._annotations:
            value = Annotated(tuple(self._annotations), value)
            self._annotations = []
        if not self._stack:
            self.values.append(value)
            return
        ion_type, container = self._stack[-1]
        if ion_type is IonType.STRUCT:
            if self._field_name is None:
                raise InvalidOperationError("values inside a struct need a field name")
            container[self._field_name] = value
            self._field_name = None
        else:
            container.append(value)

    def write_null(self, ion_type: IonType) -> None:
        self._emit(None)

    def write_decimal(self, value: BigDecimal) -> None:
        self._emit(value.to_decimal())

    def write_string(self, text: Optional[str]) -> None:
        self._emit(text)

    def write_int(self, value: int) -> None:
        self._emit(int(value))

    def set_field_name(self, name: str) -> None:
        if not self._stack or self._stack[-1][0] is not IonType.STRUCT:
            raise InvalidOperationError("field names are only valid inside a struct")
        self._field_name = name

    def add_type_annotation(self, text: str) -> None:
        self._annotations.append(text)

    def step_in(self, ion_type: IonType) -> None:
        if not ion_type.is_container or ion_type is IonType.DATAGRAM:
            raise InvalidOperationError(f"cannot step into {ion_type.value}")
        container: Any = {} if ion_type is IonType.STRUCT else []
        self._emit(container)
        self._stack.append((ion_type, container))

    def step_out(self) -> None:
        if not self._stack:
            raise InvalidOperationError("step_out() at top level")
        if self._field_name is not None:
            raise InvalidOperationError(f"field {self._field_name!r} has no value")
        self._stack.pop()


__all__ = ["Annotated", "IonWriter", "TreeWriter"]
