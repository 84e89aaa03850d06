from decimal import Decimal

import pytest

from exact_price.utils.decimal_tools import as_decimal, sign_of, truncate_toward_zero


def test_as_decimal_converts_floats_via_string():
    assert as_decimal(1.115) == Decimal("1.115")
    assert as_decimal("2.45") == Decimal("2.45")
    assert as_decimal(3) == Decimal(3)


def test_as_decimal_rejects_bool():
    with pytest.raises(TypeError):
        as_decimal(True)


@pytest.mark.parametrize("value, expected", [("2.9", 2), ("-2.9", -2), ("0.5", 0), ("-0.5", 0), ("7", 7)])
def test_truncate_toward_zero(value, expected):
    assert truncate_toward_zero(Decimal(value)) == expected


def test_sign_of_treats_zero_as_positive():
    assert sign_of(Decimal("-0.01")) == -1
    assert sign_of(Decimal("0")) == 1
    assert sign_of(Decimal("5")) == 1
