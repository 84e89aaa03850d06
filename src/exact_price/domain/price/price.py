from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Mapping

from exact_price.domain.errors import CurrencyMismatchError, EmptyInputError, InvalidArgumentError
from exact_price.domain.price.rounding import round_by_mode
from exact_price.domain.price.rounding_mode import RoundingMode
from exact_price.domain.price.rounding_policy import payable_rounding_policy
from exact_price.domain.price.split import split_minor_units
from exact_price.utils.decimal_tools import DIVISION_CONTEXT, EXACT_CONTEXT, DecimalLike, as_decimal

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)

# Largest difference still treated as equal by `likely_equal`
LIKELY_EQUAL_TOLERANCE = Decimal("0.000000001")


class Price:
    """Represents an exact monetary amount in one currency.

    Price is immutable: every operation returns a new Price. The amount stays exact (no float
    rounding) until `get_payable` or `get_payable_by_rounding_mode` produce a rounded copy.

    Combining prices is guarded by currency: same currencies combine; a zero price adopts the
    currency of the other operand; anything else raises `CurrencyMismatchError`. Comparisons
    never raise, they return False across currencies.

    Attributes:
        amount (Decimal): The exact amount.
        currency (str): Currency code (e.g. "EUR", "points").
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: str):
        """Initialize Price with amount and currency.

        Prefer the factory methods (`from_float`, `from_decimal`, `zero`, `from_minor_units`).

        Args:
            amount: Exact amount (Decimal-like scalar).
            currency (str): Currency code; may be empty for an unset price.

        Raises:
            ValueError: If $amount cannot be converted to a finite Decimal.
            TypeError: If $currency is not a string.
        """
        # Raise: currency must be a string
        if not isinstance(currency, str):
            raise TypeError(f"$currency must be a string, but provided value is: {currency!r}")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Price` because $amount ({amount}) cannot be converted to Decimal") from e

        # Raise: NaN and infinity are not amounts
        if not decimal_amount.is_finite():
            raise ValueError(f"$amount must be finite, but provided value is: {decimal_amount}")

        self._amount = decimal_amount
        self._currency = currency

    # region Factories

    @classmethod
    def from_float(cls, amount: float, currency: str) -> Price:
        """Create a Price from a float, converted via its shortest string form (2.45 stays 2.45)."""
        return cls(amount, currency)

    @classmethod
    def from_decimal(cls, amount: DecimalLike, currency: str) -> Price:
        """Create a Price from an exact decimal amount."""
        return cls(as_decimal(amount), currency)

    @classmethod
    def zero(cls, currency: str) -> Price:
        """Create a zero Price in $currency."""
        return cls(Decimal(0), currency)

    @classmethod
    def from_minor_units(cls, amount: int, precision: int, currency: str) -> Price:
        """Create a Price from an amount in minor units.

        To get 2.45 EUR use `Price.from_minor_units(245, 100, "EUR")`.

        Args:
            amount: Amount in minor units.
            precision: Minor units per unit. A $precision of 0 yields a zero Price.
            currency: Currency code.

        Returns:
            Price with amount $amount / $precision.
        """
        if precision == 0:
            return cls.zero(currency)
        return cls(DIVISION_CONTEXT.divide(Decimal(amount), Decimal(precision)), currency)

    @classmethod
    def from_str(cls, value_str: str) -> Price:
        """Parse Price from string like '2.45 EUR'.

        Args:
            value_str (str): String representation.

        Returns:
            Price: Price object.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts
        try:
            amount = Decimal(amount_part)
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        return cls(amount, currency_part)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Price:
        """Create a Price from a `{"amount": ..., "currency": ...}` record (see `to_dict`).

        Raises:
            ValueError: If a field is missing or invalid.
        """
        for field_name in ("amount", "currency"):
            if field_name not in data:
                raise ValueError(f"Cannot decode `Price` because field '{field_name}' is missing in {dict(data)}")

        currency = data["currency"]
        if not isinstance(currency, str):
            raise ValueError(f"Cannot decode `Price` because $currency must be a string, but provided value is: {currency!r}")

        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (str, int, float, Decimal)):
            raise ValueError(f"Cannot decode `Price` because $amount has unsupported type: {amount!r}")

        return cls(amount, currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the exact amount."""
        return self._amount

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    # endregion

    # region Arithmetic

    def _currency_guard(self, other: Price) -> str:
        """Return the currency of a combination of $self and $other.

        Raises:
            CurrencyMismatchError: If currencies differ and neither price is zero.
        """
        if self._currency == other._currency:
            return other._currency

        if self.is_zero():
            logger.debug(f"Zero price in '{self._currency}' adopts currency '{other._currency}'")
            return other._currency

        if other.is_zero():
            logger.debug(f"Zero price in '{other._currency}' adopts currency '{self._currency}'")
            return self._currency

        raise CurrencyMismatchError(self._currency, other._currency, Price.zero(self._currency))

    def add(self, other: Price) -> Price:
        """Return the sum of $self and $other.

        Raises:
            CurrencyMismatchError: If currencies differ and neither price is zero. The error's
                `fallback` is a zero Price in $self.currency.
        """
        currency = self._currency_guard(other)
        return Price(EXACT_CONTEXT.add(self._amount, other._amount), currency)

    def force_add(self, other: Price) -> Price:
        """Return the sum of $self and $other, or $self unchanged if the currencies clash."""
        try:
            return self.add(other)
        except CurrencyMismatchError:
            return self

    def sub(self, other: Price) -> Price:
        """Return $self minus $other.

        Raises:
            CurrencyMismatchError: If currencies differ and neither price is zero.
        """
        currency = self._currency_guard(other)
        return Price(EXACT_CONTEXT.subtract(self._amount, other._amount), currency)

    def discounted(self, percent: DecimalLike) -> Price:
        """Return the Price reduced by $percent percent."""
        factor = EXACT_CONTEXT.subtract(HUNDRED, as_decimal(percent))
        amount = DIVISION_CONTEXT.divide(EXACT_CONTEXT.multiply(self._amount, factor), HUNDRED)
        return Price(amount, self._currency)

    def taxed(self, percent: DecimalLike) -> Price:
        """Return the Price with $percent tax added (assuming $self is net)."""
        return Price(EXACT_CONTEXT.add(self._amount, self.tax_from_net(percent).amount), self._currency)

    def tax_from_net(self, percent: DecimalLike) -> Price:
        """Return the tax amount of $percent percent, assuming $self is the net amount (100%)."""
        amount = DIVISION_CONTEXT.divide(EXACT_CONTEXT.multiply(self._amount, as_decimal(percent)), HUNDRED)
        return Price(amount, self._currency)

    def tax_from_gross(self, percent: DecimalLike) -> Price:
        """Return the tax amount of $percent percent, assuming $self is the gross amount (100% + $percent)."""
        decimal_percent = as_decimal(percent)
        amount = DIVISION_CONTEXT.divide(
            EXACT_CONTEXT.multiply(self._amount, decimal_percent),
            EXACT_CONTEXT.add(HUNDRED, decimal_percent),
        )
        return Price(amount, self._currency)

    def inverse(self) -> Price:
        """Return the Price with negated amount."""
        return Price(EXACT_CONTEXT.minus(self._amount), self._currency)

    def multiply(self, qty: int) -> Price:
        """Return the Price multiplied by $qty."""
        return Price(EXACT_CONTEXT.multiply(self._amount, Decimal(qty)), self._currency)

    def divided(self, qty: int) -> Price:
        """Return the Price divided by $qty; dividing by zero yields a zero Price."""
        if qty == 0:
            logger.warning(f"Cannot divide price {self} by zero in `divided`; returning zero price")
            return Price.zero(self._currency)
        return Price(DIVISION_CONTEXT.divide(self._amount, Decimal(qty)), self._currency)

    @staticmethod
    def sum_all(*prices: Price) -> Price:
        """Return the sum of all $prices, added left to right.

        Raises:
            EmptyInputError: If no price is given.
            CurrencyMismatchError: On the first pair of non-zero prices in different currencies.
        """
        if not prices:
            raise EmptyInputError("Cannot call `sum_all` because no $prices were given")

        result = prices[0].clone()
        for price in prices[1:]:
            result = result.add(price)
        return result

    # endregion

    # region Comparison

    def equal(self, other: Price) -> bool:
        """Return True if currency and amount are exactly the same."""
        if self._currency != other._currency:
            return False
        return self._amount == other._amount

    def likely_equal(self, other: Price) -> bool:
        """Return True if currencies match and amounts differ by less than 1e-9."""
        if self._currency != other._currency:
            return False
        difference = EXACT_CONTEXT.subtract(self._amount, other._amount)
        return abs(difference) < LIKELY_EQUAL_TOLERANCE

    def is_less_than(self, other: Price) -> bool:
        """Return True if $self is less than $other; always False across currencies."""
        if self._currency != other._currency:
            return False
        return self._amount < other._amount

    def is_greater_than(self, other: Price) -> bool:
        """Return True if $self is greater than $other; always False across currencies."""
        if self._currency != other._currency:
            return False
        return self._amount > other._amount

    def is_less_than_value(self, amount: DecimalLike) -> bool:
        """Return True if the amount is less than $amount (currency is not checked)."""
        return self._amount < as_decimal(amount)

    def is_greater_than_value(self, amount: DecimalLike) -> bool:
        """Return True if the amount is greater than $amount (currency is not checked)."""
        return self._amount > as_decimal(amount)

    def is_negative(self) -> bool:
        return self.is_less_than_value(0)

    def is_positive(self) -> bool:
        return self.is_greater_than_value(0)

    def is_zero(self) -> bool:
        return self.equal(Price.zero(self._currency))

    # endregion

    # region Rounding

    def get_payable(self) -> Price:
        """Return the Price rounded to what can actually be paid in its currency.

        E.g. an exact amount of 1.23344 EUR becomes 1.23 EUR.
        """
        mode, precision = payable_rounding_policy(self._currency)
        return self.get_payable_by_rounding_mode(mode, precision)

    def get_payable_by_rounding_mode(self, mode: RoundingMode | str, precision: int) -> Price:
        """Return the Price rounded with $mode to 1/$precision units.

        See `round_by_mode` for the exact rules. Amounts too large to round come back
        unrounded; use `get_payable_with_overflow` to detect that.
        """
        return Price(round_by_mode(self._amount, mode, precision).amount, self._currency)

    def get_payable_with_overflow(self) -> tuple[Price, bool]:
        """Return the payable Price and whether rounding was skipped because of overflow."""
        mode, precision = payable_rounding_policy(self._currency)
        result = round_by_mode(self._amount, mode, precision)
        return Price(result.amount, self._currency), result.overflowed

    def is_payable(self) -> bool:
        """Return True if the Price is already rounded to its payable precision."""
        return self.get_payable().equal(self)

    def split_in_payables(self, count: int) -> list[Price]:
        """Split the payable Price into $count payable parts whose sum equals `get_payable()`.

        E.g. 12.456 EUR (payable 12.46) split in 6 gives four parts of 2.08 followed by two
        parts of 2.07, not six times 2.08 or 2.07.

        Raises:
            InvalidArgumentError: If $count is not positive, or if the amount is too large to be rounded.
        """
        if count <= 0:
            raise InvalidArgumentError(f"Cannot call `split_in_payables` because $count must be higher than zero, but provided value is: {count}")

        payable, overflowed = self.get_payable_with_overflow()

        # Raise: an unrounded amount has no minor-unit total whose parts could sum back to it
        if overflowed:
            raise InvalidArgumentError(f"Cannot call `split_in_payables` because amount is too large to round, but provided value is: {self}")

        _, precision = payable_rounding_policy(self._currency)
        scaled = EXACT_CONTEXT.multiply(payable.amount, Decimal(precision))
        total = int(scaled.to_integral_value(rounding=ROUND_HALF_UP))

        return [Price.from_minor_units(part, precision, self._currency) for part in split_minor_units(total, count)]

    # endregion

    # region Conversion

    def float_amount(self) -> float:
        """Return the amount as float; for display only, never for further calculation."""
        return float(self._amount)

    def clone(self) -> Price:
        return Price(self._amount, self._currency)

    def to_dict(self) -> dict[str, str]:
        """Return the `{"amount": ..., "currency": ...}` record; the amount is a string to keep full precision."""
        return {"amount": str(self._amount), "currency": self._currency}

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        if not isinstance(other, Price):
            return False
        return self.equal(other)

    def __hash__(self) -> int:
        return hash((self._amount, self._currency))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.is_less_than(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.is_greater_than(other)

    def __add__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self) -> Price:
        return self.inverse()

    def __str__(self) -> str:
        """Return string like '2.45 EUR'."""
        return f"{self._amount} {self._currency}"

    def __repr__(self) -> str:
        """Return string like 'Price(2.45, EUR)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency})"

    # endregion


def sum_all(*prices: Price) -> Price:
    """Return the sum of all $prices; see `Price.sum_all`."""
    return Price.sum_all(*prices)
