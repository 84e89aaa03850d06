from __future__ import annotations

from dataclasses import dataclass, field

from exact_price.domain.errors import ChargeTypeMismatchError
from exact_price.domain.price.price import Price

# Default type tag of a Charge
CHARGE_TYPE_MAIN = "main"


def _unset_price() -> Price:
    return Price.zero("")


@dataclass(frozen=True)
class Charge:
    """Represents one typed component of a total.

    A Charge() with no arguments is the empty charge: zero prices without currency and an
    empty type tag.

    Attributes:
        price (Price): The amount actually charged, in the currency it is paid in.
        value (Price): The same charge expressed in another (base) unit, e.g. loyalty points.
        type (str): Tag that tells different charges of one thing apart (e.g. "main").
    """

    price: Price = field(default_factory=_unset_price)
    value: Price = field(default_factory=_unset_price)
    type: str = ""

    def __post_init__(self) -> None:
        """Validate the charge data after initialization.

        Raises:
            TypeError: If $price or $value is not a Price, or $type is not a string.
        """
        if not isinstance(self.price, Price):
            raise TypeError(f"$price must be a Price instance, but provided value is: {self.price!r}")

        if not isinstance(self.value, Price):
            raise TypeError(f"$value must be a Price instance, but provided value is: {self.value!r}")

        if not isinstance(self.type, str):
            raise TypeError(f"$type must be a string, but provided value is: {self.type!r}")

    def add(self, other: Charge) -> Charge:
        """Return a Charge with $price and $value of both charges summed.

        Raises:
            ChargeTypeMismatchError: If the charges have different types.
            CurrencyMismatchError: If $price or $value cannot be added because of currency.
        """
        if self.type != other.type:
            raise ChargeTypeMismatchError(self.type, other.type)

        price = self.price.add(other.price)
        value = self.value.add(other.value)
        return Charge(price=price, value=value, type=self.type)

    def get_payable(self) -> Charge:
        """Return the Charge with $price and $value each rounded to their payable precision."""
        return Charge(price=self.price.get_payable(), value=self.value.get_payable(), type=self.type)

    def mul(self, qty: int) -> Charge:
        """Return the Charge with $price and $value multiplied by $qty."""
        return Charge(price=self.price.multiply(qty), value=self.value.multiply(qty), type=self.type)

    def __str__(self) -> str:
        return f"Charge(type='{self.type}', price={self.price}, value={self.value})"
