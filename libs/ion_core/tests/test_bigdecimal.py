from decimal import Decimal

import pytest

from ionsym import BigDecimal


def test_from_decimal_keeps_scale_and_sign_of_zero():
    d = BigDecimal.from_decimal(Decimal("1.00"))
    assert (d.int_val, d.scale, d.is_negative_zero) == (100, 2, False)

    nz = BigDecimal.from_decimal(Decimal("-0.0"))
    assert (nz.int_val, nz.scale, nz.is_negative_zero) == (0, 1, True)

    neg = BigDecimal.from_decimal(Decimal("-12.5"))
    assert (neg.int_val, neg.scale) == (-125, 1)

    big = BigDecimal.from_decimal(Decimal("5E+1"))
    assert (big.int_val, big.scale) == (5, -1)


def test_from_float_uses_shortest_repr():
    assert (BigDecimal.from_float(1.0).int_val, BigDecimal.from_float(1.0).scale) == (10, 1)
    assert BigDecimal.from_float(0.1).to_decimal() == Decimal("0.1")
    assert BigDecimal.from_float(-0.0).is_negative_zero
    with pytest.raises(ValueError):
        BigDecimal.from_float(float("nan"))
    with pytest.raises(ValueError):
        BigDecimal.from_float(float("inf"))


def test_to_decimal_round_trip_text():
    assert str(BigDecimal(0, 1, negative_zero=True)) == "-0.0"
    assert str(BigDecimal(150, 2)) == "1.50"
    assert str(BigDecimal(5, -1)) == "5E+1"
    assert BigDecimal(-125, 1).to_float() == -12.5


def test_numeric_equality_ignores_scale_and_zero_sign():
    assert BigDecimal(10, 1) == BigDecimal(100, 2)
    assert hash(BigDecimal(10, 1)) == hash(BigDecimal(100, 2))
    assert BigDecimal(0, 0, negative_zero=True) == BigDecimal(0)
    assert BigDecimal(5, -1) == 50
    assert BigDecimal(25, 1) == Decimal("2.50")
    assert BigDecimal(1) < BigDecimal(15, 1)
    assert BigDecimal(-1) <= BigDecimal(0)


def test_parse_accepts_ion_exponent():
    d = BigDecimal.parse("1.5d-3")
    assert (d.int_val, d.scale) == (15, 4)
    assert BigDecimal.parse("-0.00").is_negative_zero
    with pytest.raises(ValueError):
        BigDecimal.parse("abc")
    with pytest.raises(ValueError):
        BigDecimal.parse("NaN")


def test_constructor_validation():
    with pytest.raises(ValueError):
        BigDecimal(1, 0, negative_zero=True)
    with pytest.raises(TypeError):
        BigDecimal(1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BigDecimal(1, True)  # type: ignore[arg-type]
    assert BigDecimal(-12345, 2).precision == 5
    assert BigDecimal(0).is_zero


def test_values_past_the_int_str_digit_limit():
    big = BigDecimal(10**5000)
    assert big.precision == 5001
    assert len(str(big)) == 5001
    assert big == BigDecimal(10**5001, 1)
    assert hash(big) == hash(BigDecimal(10**5001, 1))

    ones = BigDecimal.from_decimal(Decimal("1" * 5000))
    assert ones.int_val == (10**5000 - 1) // 9
    assert ones.precision == 5000

    parsed = BigDecimal.parse("-" + "9" * 5000 + ".5")
    assert parsed.int_val == -(10**5001 - 5)
    assert parsed.scale == 1
    assert parsed.precision == 5001

    d = BigDecimal(7 * 10**4400, 3).to_decimal()
    assert d == Decimal((0, (7,) + (0,) * 4400, -3))
    assert repr(BigDecimal(10**5000)).startswith("BigDecimal(1000")
