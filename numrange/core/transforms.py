"""Wrapping and clamping values into a range.

Both operations ignore exclusivity: ``wrap`` always works on the half-open
range ``[lo, hi)`` and ``clamp`` on the closed range ``[lo, hi]``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from numbers import Integral
from typing import cast

from numrange.core.bounds import maximum, min_max, minimum
from numrange.core.types import S

logger = logging.getLogger(__name__)


def wrap(low: S, high: S, value: S) -> S:
    """Normalize a value that wraps around within a range.

    The range is always treated as ``[lo, hi)`` whatever order the bounds
    are given in. Values below or above it are shifted by whole multiples
    of ``hi - lo`` until they land inside, as for angles or ring-buffer
    indices. A range of zero width maps every value to its single bound.

    Integral values are computed with exact integer arithmetic and
    converted back to the type of ``value``, so fixed-width unsigned types
    never overflow on the way. When the bounds and the value are not all of
    one type the result is a plain ``int``.

    Parameters
    ----------
    low : S
        One end of the range (the inclusive end after ordering).
    high : S
        The other end of the range (the exclusive end after ordering).
    value : S
        The value to normalize.

    Returns
    -------
    S
        The equivalent value in ``[lo, hi)``. NaN and infinite values
        produce NaN.

    Examples
    --------
    >>> wrap(0, 100, 120)
    20
    >>> wrap(100, 0, -10)
    90
    >>> wrap(0, 360, 361.5)
    1.5
    """
    low, high = min_max(low, high)
    if low == high:
        logger.debug("Wrapping %r into empty range at %r", value, low)
        return low

    if (
        isinstance(low, Integral)
        and isinstance(high, Integral)
        and isinstance(value, Integral)
    ):
        lo = int(low)
        result = lo + (int(value) - lo) % (int(high) - lo)
        if type(low) is type(high) is type(value):
            return cast(S, type(value)(result))
        # mixed integer types
        return cast(S, result)

    if isinstance(value, Decimal) and not value.is_finite():
        return cast(S, Decimal("NaN"))

    span = high - low
    offset = (value - low) % span
    if offset < 0:
        # Decimal modulo takes the sign of the dividend
        offset += span
    result = low + offset
    if result >= high:
        # rounding landed on the excluded end, which is equivalent to lo
        return low
    return cast(S, result)


def clamp(low: S, high: S, value: S) -> S:
    """Clamp a value to the closed range between two bounds.

    Parameters
    ----------
    low : S
        One end of the range.
    high : S
        The other end of the range.
    value : S
        The value to clamp.

    Returns
    -------
    S
        ``lo`` if the value is below the range, ``hi`` if above it,
        otherwise the value itself.

    Examples
    --------
    >>> clamp(0, 100, 120)
    100
    >>> clamp(100, 0, -20)
    0
    """
    low, high = min_max(low, high)
    return maximum(low, minimum(high, value))
