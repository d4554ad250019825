from decimal import Decimal

import pytest

from ionsym import (
    BigDecimal,
    InvalidOperationError,
    IonDecimal,
    IonType,
    NullValueAccessError,
    ValueLockedError,
)


def test_same_scale_and_value_is_equivalent():
    a = IonDecimal(BigDecimal(10, 1))
    b = IonDecimal(BigDecimal(10, 1))
    assert a.is_equivalent_to(b)
    assert IonDecimal(1.0).is_equivalent_to(IonDecimal(Decimal("1.0")))


def test_different_fractional_precision_is_not_equivalent():
    a = IonDecimal(BigDecimal(10, 1))
    b = IonDecimal(BigDecimal(100, 2))
    assert a.big_decimal_value == b.big_decimal_value
    assert not a.is_equivalent_to(b)
    assert not b.is_equivalent_to(a)
    assert not IonDecimal(Decimal("50")).is_equivalent_to(IonDecimal(Decimal("50.0")))


def test_sign_of_zero_matters():
    pos = IonDecimal(Decimal("0"))
    neg = IonDecimal(Decimal("-0"))
    assert not pos.is_equivalent_to(neg)
    assert not neg.is_equivalent_to(pos)
    assert neg.is_equivalent_to(IonDecimal(BigDecimal(0, 0, negative_zero=True)))


def test_integral_values_compare_numerically():
    five_e1 = IonDecimal(BigDecimal(5, -1))
    assert five_e1.is_equivalent_to(IonDecimal(BigDecimal(50, 0)))
    assert not five_e1.is_equivalent_to(IonDecimal(BigDecimal(6, -1)))
    assert IonDecimal(7).is_equivalent_to(IonDecimal(Decimal("7")))


def test_null_decimals():
    n1 = IonDecimal.new_null()
    n2 = IonDecimal.new_null()
    zero = IonDecimal(0)
    assert n1.is_null and n1.ion_type is IonType.DECIMAL
    assert n1.is_equivalent_to(n2)
    assert not n1.is_equivalent_to(zero)
    assert not zero.is_equivalent_to(n1)

    with pytest.raises(NullValueAccessError):
        n1.decimal_value
    with pytest.raises(NullValueAccessError):
        n1.big_decimal_value
    with pytest.raises(NullValueAccessError):
        n1.float_value


def test_not_equivalent_to_other_kinds():
    d = IonDecimal(1)
    assert not d.is_equivalent_to(Decimal("1"))
    assert not d.is_equivalent_to(None)


def test_annotations_are_part_of_equivalence():
    a = IonDecimal(Decimal("1.5"))
    b = IonDecimal(Decimal("1.5"))
    a.add_annotation("usd")
    assert not a.is_equivalent_to(b)
    b.add_annotation("usd")
    assert a.is_equivalent_to(b)
    assert a.annotations == ("usd",)
    a.clear_annotations()
    assert a.annotations == ()


def test_setters_and_accessors():
    d = IonDecimal.new_null()
    d.decimal_value = Decimal("2.50")
    assert not d.is_null
    assert (d.big_decimal_value.int_val, d.big_decimal_value.scale) == (250, 2)
    assert d.decimal_value == Decimal("2.5")
    assert str(d.decimal_value) == "2.50"
    assert d.float_value == 2.5

    d.big_decimal_value = BigDecimal(-3)
    assert d.decimal_value == Decimal("-3")

    d.make_null()
    assert d.is_null
    with pytest.raises(TypeError):
        d.big_decimal_value = Decimal("1")  # type: ignore[assignment]


def test_locked_value_rejects_mutation():
    d = IonDecimal(Decimal("1.5"))
    d.make_read_only()
    assert d.is_read_only

    with pytest.raises(ValueLockedError):
        d.decimal_value = Decimal("2")
    with pytest.raises(ValueLockedError):
        d.big_decimal_value = BigDecimal(2)
    with pytest.raises(ValueLockedError):
        d.make_null()
    with pytest.raises(InvalidOperationError):
        d.add_annotation("x")

    # reads still work
    assert d.decimal_value == Decimal("1.5")


def test_constructor_rejects_non_numbers():
    with pytest.raises(TypeError):
        IonDecimal(True)
    with pytest.raises(TypeError):
        IonDecimal("1.0")  # type: ignore[arg-type]


def test_very_long_values():
    a = IonDecimal(BigDecimal(10**5000))
    b = IonDecimal(BigDecimal(10**5000))
    assert a.is_equivalent_to(b)
    assert not a.is_equivalent_to(IonDecimal(BigDecimal(10**5001, 1)))

    ones = IonDecimal(Decimal("1" * 5000))
    assert ones.decimal_value == Decimal("1" * 5000)
    assert ones.big_decimal_value.int_val == (10**5000 - 1) // 9

    frac = IonDecimal(BigDecimal(7 * 10**4400, 3))
    assert frac.decimal_value == Decimal((0, (7,) + (0,) * 4400, -3))
