# path: libs/ion_core/ionsym/ion_decimal.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

from .bigdecimal import BigDecimal
from .value import IonType, IonValue

Number = Union[float, int, Decimal, BigDecimal]


def _to_big_decimal(value: Number) -> BigDecimal:
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a decimal value")
    if isinstance(value, Decimal):
        return BigDecimal.from_decimal(value)
    if isinstance(value, int):
        return BigDecimal.from_int(value)
    if isinstance(value, float):
        return BigDecimal.from_float(value)
    raise TypeError(f"cannot build a decimal from {type(value).__name__}")


class IonDecimal(IonValue):
    """Nullable, lockable decimal node."""

    ion_type = IonType.DECIMAL

    def __init__(self, value: Optional[Number]):
        super().__init__(is_null=value is None)
        self._val: Optional[BigDecimal] = None if value is None else _to_big_decimal(value)

    @classmethod
    def new_null(cls) -> "IonDecimal":
        return cls(None)

    @property
    def big_decimal_value(self) -> BigDecimal:
        self._throw_if_null()
        return self._val

    @big_decimal_value.setter
    def big_decimal_value(self, value: BigDecimal) -> None:
        self._throw_if_locked()
        if not isinstance(value, BigDecimal):
            raise TypeError(f"expected BigDecimal, got {type(value).__name__}")
        self._val = value
        self._null = False

    @property
    def decimal_value(self) -> Decimal:
        self._throw_if_null()
        return self._val.to_decimal()

    @decimal_value.setter
    def decimal_value(self, value: Decimal) -> None:
        self._throw_if_locked()
        self._val = BigDecimal.from_decimal(value)
        self._null = False

    @property
    def float_value(self) -> float:
        self._throw_if_null()
        return self._val.to_float()

    def make_null(self) -> None:
        super().make_null()
        self._val = None

    def is_equivalent_to(self, other: object) -> bool:
        if not super().is_equivalent_to(other):
            return False
        if self.is_null:
            return other.is_null
        if other.is_null:
            return False

        mine = self._val
        theirs = other.big_decimal_value
        if mine.is_negative_zero != theirs.is_negative_zero:
            return False
        if mine.scale > 0 or theirs.scale > 0:
            # fractional digits are significant: 1.0 is not 1.00
            return mine.scale == theirs.scale and mine.int_val == theirs.int_val
        return mine == theirs

    def write_body_to(self, writer) -> None:
        if self.is_null:
            writer.write_null(IonType.DECIMAL)
            return
        writer.write_decimal(self._val)

    def __repr__(self) -> str:
        if self.is_null:
            return "IonDecimal(null)"
        return f"IonDecimal({self._val})"


__all__ = ["IonDecimal"]
