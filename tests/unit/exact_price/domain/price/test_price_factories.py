from decimal import Decimal

import pytest

from exact_price.domain.price.price import Price


def test_from_float_uses_shortest_representation():
    assert Price.from_float(1.115, "EUR").amount == Decimal("1.115")


def test_from_minor_units():
    price = Price.from_minor_units(245, 100, "EUR")
    assert price.amount == Decimal("2.45")
    assert price.currency == "EUR"


def test_from_minor_units_with_zero_precision_is_zero():
    assert Price.from_minor_units(245, 0, "EUR") == Price.zero("EUR")


def test_zero():
    zero = Price.zero("points")
    assert zero.is_zero()
    assert zero.currency == "points"


def test_clone_is_equal_but_distinct():
    price = Price.from_decimal("3.14", "EUR")
    clone = price.clone()
    assert clone == price
    assert clone is not price


def test_str_round_trip():
    price = Price.from_decimal("1000.50", "USD")
    assert str(price) == "1000.50 USD"
    assert Price.from_str(str(price)) == price


@pytest.mark.parametrize("value_str", ["", "1.00", "1.00 EUR extra", "abc EUR"])
def test_from_str_rejects_malformed_input(value_str):
    with pytest.raises(ValueError):
        Price.from_str(value_str)


def test_invalid_construction():
    with pytest.raises(TypeError):
        Price(Decimal("1"), None)
    with pytest.raises(ValueError):
        Price("not a number", "EUR")
    with pytest.raises(ValueError):
        Price(Decimal("NaN"), "EUR")
    with pytest.raises(TypeError):
        Price(True, "EUR")
