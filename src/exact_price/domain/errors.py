"""Failures raised by partial price operations.

Comparison and rounding operations are total and never raise these; only combining prices
(`add`, `sub`, `sum_all`), splitting and combining charges can fail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exact_price.domain.price.price import Price


class PriceError(Exception):
    """Base class for all failures of the price engine."""


class CurrencyMismatchError(PriceError, ValueError):
    """Raised when two non-zero prices in different currencies are combined.

    Attributes:
        left_currency: Currency of the price the operation was called on.
        right_currency: Currency of the other operand.
        fallback: Zero price in $left_currency; the value callers may continue with.
    """

    def __init__(self, left_currency: str, right_currency: str, fallback: Price) -> None:
        self.left_currency = left_currency
        self.right_currency = right_currency
        self.fallback = fallback
        super().__init__(f"Cannot calculate prices in different currencies: '{left_currency}' and '{right_currency}'")


class InvalidArgumentError(PriceError, ValueError):
    """Raised when an operation receives an argument outside its domain."""


class EmptyInputError(InvalidArgumentError):
    """Raised when an aggregate operation receives no input at all."""


class ChargeTypeMismatchError(PriceError, ValueError):
    """Raised when charges of different types are combined.

    Attributes:
        left_type: Type tag of the charge the operation was called on.
        right_type: Type tag of the other charge.
    """

    def __init__(self, left_type: str, right_type: str) -> None:
        self.left_type = left_type
        self.right_type = right_type
        super().__init__(f"Cannot add charges of different types: '{left_type}' and '{right_type}'")
