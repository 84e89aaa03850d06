from __future__ import annotations

import logging
from decimal import Decimal
from typing import NamedTuple

from exact_price.domain.price.rounding_mode import RoundingMode
from exact_price.utils.decimal_tools import DIVISION_CONTEXT, EXACT_CONTEXT, sign_of, truncate_toward_zero

logger = logging.getLogger(__name__)

# Largest minor-unit count that is still rounded; beyond it the amount is returned unrounded
MAX_MINOR_UNITS = 2**63 - 1

# Smallest scaled magnitude whose truncation exceeds `MAX_MINOR_UNITS`
_OVERFLOW_THRESHOLD = Decimal(MAX_MINOR_UNITS + 1)


class RoundingResult(NamedTuple):
    """Container for (amount + overflowed) returned by `round_by_mode`.

    Attributes:
        amount: Rounded amount, or the untouched input amount when $overflowed is True.
        overflowed: True if the amount was too large to be rounded.
    """

    amount: Decimal
    overflowed: bool


def _coerce_mode(mode: RoundingMode | str) -> RoundingMode | None:
    if isinstance(mode, RoundingMode):
        return mode
    try:
        return RoundingMode(str(mode).lower())
    except ValueError:
        return None


def round_by_mode(amount: Decimal, mode: RoundingMode | str, precision: int) -> RoundingResult:
    """Round $amount to 1/$precision units using $mode.

    The amount is scaled to minor units and truncated toward zero. The first digit after the
    cut decides whether the truncated value moves by one minor unit. Only non-negative amounts
    are adjusted by CEIL, HALF_UP and HALF_DOWN; negative amounts keep their truncated value
    there. FLOOR moves every negative amount one minor unit further down, including amounts
    that are already exact.

    Examples:
        1.115 -> 1.12 (HALF_UP) / 1.11 (FLOOR)
        -1.115 -> -1.11 (HALF_UP) / -1.12 (FLOOR)

    Args:
        amount: Exact amount to round.
        mode: Rounding mode; an unknown mode string leaves the truncated value unadjusted.
        precision: Minor units per unit (100 rounds to cents).

    Returns:
        RoundingResult with the rounded amount, or the unrounded $amount flagged as overflowed
        when the scaled value exceeds `MAX_MINOR_UNITS`. A $precision of 0 yields zero.
    """
    if precision == 0:
        return RoundingResult(Decimal(0), False)

    scaled = EXACT_CONTEXT.multiply(amount, Decimal(precision))

    # Check: beyond the representable minor-unit range nothing is rounded (compared as Decimal, never built as int)
    if scaled.copy_abs() >= _OVERFLOW_THRESHOLD:
        logger.warning(f"Amount {amount} is too large to round at $precision {precision}; returning it unrounded")
        return RoundingResult(amount, True)

    truncated = truncate_toward_zero(scaled)

    negative = sign_of(amount)
    extra_digit = (truncate_toward_zero(EXACT_CONTEXT.multiply(scaled, Decimal(10))) - truncated * 10) * negative

    resolved_mode = _coerce_mode(mode)
    if resolved_mode is RoundingMode.CEIL:
        if negative == 1 and extra_digit > 0:
            truncated += negative
    elif resolved_mode is RoundingMode.HALF_UP:
        if negative == 1 and extra_digit >= 5:
            truncated += negative
    elif resolved_mode is RoundingMode.HALF_DOWN:
        if negative == 1 and extra_digit > 5:
            truncated += negative
    elif resolved_mode is RoundingMode.FLOOR:
        if negative == -1:
            truncated += negative

    rounded = DIVISION_CONTEXT.divide(Decimal(truncated), Decimal(precision))
    return RoundingResult(rounded, False)
