import pytest

from exact_price.domain.errors import InvalidArgumentError
from exact_price.domain.price.price import Price, sum_all
from exact_price.domain.price.split import split_minor_units


def test_split_front_loads_remainder():
    parts = Price.from_float(12.456, "EUR").split_in_payables(6)

    assert parts == [Price.from_decimal(amount, "EUR") for amount in ["2.08", "2.08", "2.08", "2.08", "2.07", "2.07"]]
    assert sum_all(*parts) == Price.from_decimal("12.46", "EUR")
    assert sum_all(*parts) == Price.from_float(12.456, "EUR").get_payable()


@pytest.mark.parametrize("count", [1, 2, 3, 6, 7, 13, 100, 1247])
@pytest.mark.parametrize("amount", ["12.456", "0.01", "0", "-12.456", "1000000.999", "33.333333"])
def test_split_sums_to_payable(amount, count):
    price = Price.from_decimal(amount, "EUR")
    parts = price.split_in_payables(count)

    assert len(parts) == count
    assert all(part.is_payable() for part in parts)
    assert sum_all(*parts).equal(price.get_payable())


def test_split_loyalty_currency_uses_whole_units():
    parts = Price.from_decimal("10.9", "points").split_in_payables(3)
    assert parts == [Price.from_decimal(amount, "points") for amount in ["4", "3", "3"]]


@pytest.mark.parametrize("count", [0, -1])
def test_split_rejects_non_positive_count(count):
    with pytest.raises(InvalidArgumentError):
        Price.from_float(10, "EUR").split_in_payables(count)


@pytest.mark.parametrize("amount", ["1e5000000", "-1e5000000", "1e30"])
def test_split_rejects_amount_too_large_to_round(amount):
    price = Price.from_decimal(amount, "EUR")
    assert price.get_payable_with_overflow()[1]

    with pytest.raises(InvalidArgumentError, match="too large"):
        price.split_in_payables(3)


def test_split_at_the_largest_payable_amount_still_sums_exactly():
    price = Price.from_decimal("92233720368547758.07", "EUR")
    parts = price.split_in_payables(7)

    assert len(parts) == 7
    assert sum_all(*parts) == price


def test_split_minor_units():
    assert split_minor_units(1246, 6) == [208, 208, 208, 208, 207, 207]
    assert split_minor_units(12, 4) == [3, 3, 3, 3]
    assert split_minor_units(2, 5) == [1, 1, 0, 0, 0]
    assert split_minor_units(0, 3) == [0, 0, 0]


def test_split_minor_units_negative_total_truncates_toward_zero():
    assert split_minor_units(-1245, 6) == [-208, -208, -208, -207, -207, -207]
    assert sum(split_minor_units(-7, 3)) == -7
