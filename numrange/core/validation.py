"""Range validation with descriptive errors."""

from __future__ import annotations

import logging

from numrange.core.formatting import to_string
from numrange.core.predicates import test
from numrange.core.types import S
from numrange.errors import OutOfRangeError

logger = logging.getLogger(__name__)


def validate(
    low: S,
    high: S,
    value: S,
    low_exclusive: bool = False,
    high_exclusive: bool = False,
) -> S:
    """Validate that a value lies within a range.

    A pass-or-fail gate: the value is returned untouched when it is inside
    the range and is never clamped.

    Parameters
    ----------
    low : S
        One end of the range.
    high : S
        The other end of the range.
    value : S
        The value to validate.
    low_exclusive : bool
        Whether ``low`` is excluded from the range.
    high_exclusive : bool
        Whether ``high`` is excluded from the range.

    Returns
    -------
    S
        The value, unchanged.

    Raises
    ------
    OutOfRangeError
        If ``test`` rejects the value. The message names the value and the
        range, e.g. ``"101 is outside of range [0,100]"``.

    Examples
    --------
    >>> validate(0, 100, 100, True, False)
    100
    >>> validate(0, 100, 101)
    Traceback (most recent call last):
        ...
    numrange.errors.OutOfRangeError: 101 is outside of range [0,100]
    """
    if not test(low, high, value, low_exclusive, high_exclusive):
        notation = to_string(low, high, low_exclusive, high_exclusive)
        logger.debug("Rejected %r: outside of %s", value, notation)
        raise OutOfRangeError(value, notation)
    return value
