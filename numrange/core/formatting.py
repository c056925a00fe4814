"""Rendering ranges in interval notation.

Ranges are written the way mathematics writes intervals: a square bracket
for an inclusive end and a parenthesis for an exclusive one, e.g.
``[0,360)``.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any

import numpy as np

from numrange.core.bounds import min_max_exclusive
from numrange.core.types import S


def format_number(value: Any) -> str:
    """Render a scalar as decimal text.

    Integers of any width and signedness are written exactly. Binary
    floating-point values get the shortest digits that round-trip at their
    own precision, in positional notation without trailing zeros, so
    ``120.0`` is written ``120`` and ``float32(0.1)`` is written ``0.1``.

    Parameters
    ----------
    value : Any
        The scalar to render.

    Returns
    -------
    str
        Decimal text for the value.

    Examples
    --------
    >>> format_number(100)
    '100'
    >>> format_number(1.5)
    '1.5'
    >>> format_number(1e21)
    '1000000000000000000000'
    """
    if isinstance(value, Integral):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return np.format_float_positional(value, trim="-")
    return str(value)


def to_string(
    low: S,
    high: S,
    low_exclusive: bool = False,
    high_exclusive: bool = False,
) -> str:
    """Render a range in interval notation.

    The bounds are ordered first, so ``to_string(100, 0, False, True)`` and
    ``to_string(0, 100, True, False)`` both give ``(0,100]``.

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
    str
        The range written as ``[lo,hi]``, ``[lo,hi)``, ``(lo,hi]`` or
        ``(lo,hi)``.

    Examples
    --------
    >>> to_string(0, 100, True, True)
    '(0,100)'
    >>> to_string(0, 100, False, True)
    '[0,100)'
    """
    low, high, low_exclusive, high_exclusive = min_max_exclusive(
        low, high, low_exclusive, high_exclusive
    )
    low_bracket = "(" if low_exclusive else "["
    high_bracket = ")" if high_exclusive else "]"
    return f"{low_bracket}{format_number(low)},{format_number(high)}{high_bracket}"
