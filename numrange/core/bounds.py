"""Endpoint canonicalization.

Every range operation accepts its bounds in either order. The functions in
this module put them in ascending order, carrying the exclusivity flags
along with the endpoint they describe.
"""

from __future__ import annotations

from numrange.core.types import S


def minimum(x: S, y: S) -> S:
    """Return the smaller of two values.

    Returns ``x`` unless ``x > y``, so ``x`` wins ties and comparisons
    involving NaN.
    """
    if x > y:
        return y
    return x


def maximum(x: S, y: S) -> S:
    """Return the bigger of two values.

    Returns ``x`` unless ``x < y``, so ``x`` wins ties and comparisons
    involving NaN.
    """
    if x < y:
        return y
    return x


def min_max(low: S, high: S) -> tuple[S, S]:
    """Order a pair of bounds so that the first is not greater than the second.

    Parameters
    ----------
    low : S
        One end of the range.
    high : S
        The other end of the range.

    Returns
    -------
    tuple[S, S]
        The bounds in ascending order.

    Examples
    --------
    >>> min_max(0, 100)
    (0, 100)
    >>> min_max(100, 0)
    (0, 100)
    """
    if low > high:
        return high, low
    return low, high


def min_max_exclusive(
    low: S, high: S, low_exclusive: bool, high_exclusive: bool
) -> tuple[S, S, bool, bool]:
    """Order a pair of bounds together with their exclusivity flags.

    When the bounds are swapped the flags are swapped with them, so each
    flag keeps describing the same endpoint.

    Parameters
    ----------
    low : S
        One end of the range.
    high : S
        The other end of the range.
    low_exclusive : bool
        Whether ``low`` is excluded from the range.
    high_exclusive : bool
        Whether ``high`` is excluded from the range.

    Returns
    -------
    tuple[S, S, bool, bool]
        ``(lo, hi, lo_exclusive, hi_exclusive)`` with ``lo <= hi``.

    Examples
    --------
    >>> min_max_exclusive(0, 100, True, False)
    (0, 100, True, False)
    >>> min_max_exclusive(100, 0, False, True)
    (0, 100, True, False)
    """
    if low > high:
        return high, low, high_exclusive, low_exclusive
    return low, high, low_exclusive, high_exclusive
