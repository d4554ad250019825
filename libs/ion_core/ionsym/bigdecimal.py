# path: libs/ion_core/ionsym/bigdecimal.py
"""Arbitrary-precision decimal with explicit scale and negative zero.

value = int_val * 10 ** -scale

``==``, ordering and ``hash`` are numeric (``1.0 == 1.00`` and ``0 == -0``).
Structural equivalence, which also looks at scale and the sign of zero, lives
in ``IonDecimal.is_equivalent_to``.
"""
from __future__ import annotations

import functools
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Tuple


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _digits(int_val: int) -> Tuple[int, ...]:
    return Decimal(abs(int_val)).as_tuple().digits


@functools.total_ordering
class BigDecimal:
    __slots__ = ("_int_val", "_scale", "_negative_zero")

    def __init__(self, int_val: int, scale: int = 0, negative_zero: bool = False):
        self._int_val = _require_int("int_val", int_val)
        self._scale = _require_int("scale", scale)
        if negative_zero and int_val != 0:
            raise ValueError("negative_zero requires a zero int_val")
        self._negative_zero = bool(negative_zero)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "BigDecimal":
        if not isinstance(value, Decimal):
            raise TypeError(f"expected decimal.Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise ValueError(f"decimal values must be finite, got {value}")
        sign, digits, exponent = value.as_tuple()
        int_val = int(Decimal((sign, digits or (0,), 0)))
        return cls(int_val, -exponent, negative_zero=bool(sign) and int_val == 0)

    @classmethod
    def from_float(cls, value: float) -> "BigDecimal":
        """Convert through the float's shortest round-trip repr (``1.0`` -> scale 1)."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"decimal values must be finite, got {value}")
        return cls.from_decimal(Decimal(repr(value)))

    @classmethod
    def from_int(cls, value: int) -> "BigDecimal":
        return cls(_require_int("value", value), 0)

    @classmethod
    def parse(cls, text: str) -> "BigDecimal":
        """Parse decimal text; Ion's ``d`` exponent marker is accepted (``1.5d-3``)."""
        try:
            dec = Decimal(text.strip().replace("d", "e").replace("D", "e"))
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal text: {text!r}") from e
        return cls.from_decimal(dec)

    @property
    def int_val(self) -> int:
        return self._int_val

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def is_negative_zero(self) -> bool:
        return self._negative_zero

    @property
    def is_zero(self) -> bool:
        return self._int_val == 0

    @property
    def precision(self) -> int:
        return len(_digits(self._int_val))

    def to_decimal(self) -> Decimal:
        sign = 1 if (self._int_val < 0 or self._negative_zero) else 0
        return Decimal((sign, _digits(self._int_val), -self._scale))

    def to_float(self) -> float:
        return float(self.to_decimal())

    def _coerce(self, other: Any):
        if isinstance(other, BigDecimal):
            return other.to_decimal()
        if isinstance(other, Decimal):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Decimal(other)
        return None

    def __eq__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_decimal() == rhs

    def __lt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_decimal() < rhs

    def __hash__(self) -> int:
        return hash(self.to_decimal())

    def __str__(self) -> str:
        return str(self.to_decimal())

    def __repr__(self) -> str:
        nz = ", negative_zero=True" if self._negative_zero else ""
        return f"BigDecimal({Decimal(self._int_val)}, scale={self._scale}{nz})"


__all__ = ["BigDecimal"]
