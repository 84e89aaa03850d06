from __future__ import annotations


def split_minor_units(total: int, count: int) -> list[int]:
    """Split $total minor units into $count integer parts that sum exactly to $total.

    Every part gets `total / count` truncated toward zero; the remainder is handed out one
    minor unit at a time to the first parts. For negative totals the remainder is negative
    and the first parts get one minor unit less.

    Examples:
        >>> split_minor_units(1246, 6)
        [208, 208, 208, 208, 207, 207]
        >>> split_minor_units(-1245, 6)
        [-208, -208, -208, -207, -207, -207]

    Args:
        total: Amount in minor units (e.g. cents).
        count: Number of parts; must be positive.

    Returns:
        List of $count minor-unit values, larger magnitudes first.

    Raises:
        ValueError: If $count is not positive.
    """
    if count <= 0:
        raise ValueError(f"$count must be positive, but provided value is: {count}")

    # Python's `//` floors; truncate toward zero instead so the remainder keeps the sign of $total
    base = abs(total) // count
    if total < 0:
        base = -base
    remainder = total - base * count

    step = 1 if remainder > 0 else -1
    return [base + step if i < abs(remainder) else base for i in range(count)]
