"""Range membership testing."""

from __future__ import annotations

from decimal import Decimal

from numrange.core.bounds import min_max_exclusive
from numrange.core.types import S


def test(
    low: S,
    high: S,
    value: S,
    low_exclusive: bool = False,
    high_exclusive: bool = False,
) -> bool:
    """Check whether a value lies within a range.

    The bounds may be given in either order; each exclusivity flag belongs
    to the bound passed next to it. With both flags unset the range is
    closed.

    Parameters
    ----------
    low : S
        One end of the range.
    high : S
        The other end of the range.
    value : S
        The value to check.
    low_exclusive : bool
        Whether ``low`` is excluded from the range.
    high_exclusive : bool
        Whether ``high`` is excluded from the range.

    Returns
    -------
    bool
        False if the value falls below or above the range or sits on an
        excluded endpoint, True otherwise.

    Examples
    --------
    >>> test(0, 100, 0)
    True
    >>> test(0, 100, 0, low_exclusive=True)
    False
    >>> test(100, 0, 100, False, True)
    True
    """
    if isinstance(value, Decimal) and value.is_nan():
        # Decimal refuses to order NaN; it fails every comparison below
        return True
    low, high, low_exclusive, high_exclusive = min_max_exclusive(
        low, high, low_exclusive, high_exclusive
    )
    return not (
        value < low
        or value > high
        or (high_exclusive and value == high)
        or (low_exclusive and value == low)
    )
