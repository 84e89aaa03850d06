from decimal import Decimal

import pytest

from exact_price.domain.price.price import Price


def test_equal_is_exact_and_currency_aware():
    assert Price.from_minor_units(245, 100, "EUR").equal(Price.from_float(2.45, "EUR"))
    assert Price.from_decimal("2.450", "EUR") == Price.from_decimal("2.45", "EUR")
    assert not Price.from_decimal("2.45", "EUR").equal(Price.from_decimal("2.45", "USD"))
    assert not Price.from_decimal("2.45", "EUR").equal(Price.from_decimal("2.4500000001", "EUR"))


def test_equal_prices_hash_equal():
    assert hash(Price.from_decimal("2.450", "EUR")) == hash(Price.from_decimal("2.45", "EUR"))
    assert len({Price.from_decimal("1", "EUR"), Price.from_decimal("1.0", "EUR")}) == 1


def test_likely_equal():
    base = Price.from_decimal("1", "EUR")
    assert base.likely_equal(Price.from_decimal("1.0000000009", "EUR"))
    assert not base.likely_equal(Price.from_decimal("1.000000001", "EUR"))
    assert not base.likely_equal(Price.from_decimal("1", "USD"))


def test_less_and_greater():
    small = Price.from_decimal("1", "EUR")
    large = Price.from_decimal("2", "EUR")
    assert small.is_less_than(large)
    assert large.is_greater_than(small)
    assert not small.is_greater_than(large)
    assert small < large
    assert large > small


def test_comparisons_across_currencies_are_false_not_errors():
    eur = Price.from_decimal("1", "EUR")
    usd = Price.from_decimal("2", "USD")
    assert not eur.is_less_than(usd)
    assert not eur.is_greater_than(usd)
    assert not usd.is_less_than(eur)
    assert not usd.is_greater_than(eur)


def test_value_comparisons_ignore_currency():
    price = Price.from_decimal("1.5", "EUR")
    assert price.is_less_than_value(2)
    assert price.is_greater_than_value("1.25")
    assert not price.is_less_than_value(Decimal("1.5"))


@pytest.mark.parametrize(
    "amount, negative, positive, zero",
    [
        ("-0.01", True, False, False),
        ("0", False, False, True),
        ("0.00", False, False, True),
        ("0.01", False, True, False),
    ],
)
def test_sign_checks(amount, negative, positive, zero):
    price = Price.from_decimal(amount, "EUR")
    assert price.is_negative() is negative
    assert price.is_positive() is positive
    assert price.is_zero() is zero


def test_float_amount_is_lossy_display_value():
    assert Price.from_decimal("2.45", "EUR").float_amount() == 2.45
    assert isinstance(Price.from_decimal("1", "EUR").float_amount(), float)
