from __future__ import annotations

from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_DOWN, ROUND_HALF_EVEN
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Addition, subtraction and multiplication never round under this context
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)

# Division may not terminate, so it gets a finite (but generous) number of significant digits
DIVISION_CONTEXT = Context(prec=64, rounding=ROUND_HALF_EVEN)


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass but never a meaningful amount
    if isinstance(value, bool):
        raise TypeError(f"$value must be Decimal-like, but provided value is a bool: {value}")

    return Decimal(str(value))


def truncate_toward_zero(value: Decimal) -> int:
    """Return the integer part of $value, dropping the fraction toward zero.

    Examples:
        >>> truncate_toward_zero(Decimal("2.9"))
        2
        >>> truncate_toward_zero(Decimal("-2.9"))
        -2
    """
    return int(value.to_integral_value(rounding=ROUND_DOWN))


def sign_of(value: Decimal) -> int:
    """Return -1 for negative $value, otherwise 1 (zero counts as positive)."""
    return -1 if value < 0 else 1
