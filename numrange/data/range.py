"""Generic numeric range model.

Provides a reusable Range[T] model bundling the four parameters that
define a range, with the range operations available as methods.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from numrange.core import clamp, test, to_string, validate, wrap
from numrange.notation import parse_notation

T = TypeVar("T", int, float)


class Range(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T]
    """A numeric range with independently inclusive or exclusive ends.

    The bounds may be given in either order. Nothing is checked at
    construction: every method orders the bounds first, swapping the
    exclusivity flags along with them.

    Attributes
    ----------
    min
        One end of the range.
    max
        The other end of the range.
    min_exclusive
        Whether ``min`` is excluded from the range (default False).
    max_exclusive
        Whether ``max`` is excluded from the range (default False).

    Examples
    --------
    >>> degrees = Range[int](min=0, max=360, max_exclusive=True)
    >>> degrees.wrap(-90)
    270
    >>> degrees.test(360)
    False
    >>> str(degrees)
    '[0,360)'

    >>> swapped = Range[int](min=100, max=0, max_exclusive=True)
    >>> str(swapped)
    '(0,100]'
    >>> swapped.clamp(120)
    100
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    min: T
    max: T
    min_exclusive: bool = False
    max_exclusive: bool = False

    @classmethod
    def from_notation(cls, text: str) -> Range[T]:
        """Create a range from interval notation such as ``"[0,100)"``.

        Parameters
        ----------
        text
            The notation to parse.

        Returns
        -------
        Range[T]
            The range, with bounds in the order they were written. Bounds
            are validated as ``T`` when the class is parametrized, so
            ``Range[float].from_notation("[0,100)")`` holds floats; the
            bare ``Range`` keeps integers written without a decimal point.

        Raises
        ------
        NotationError
            If the text is not valid interval notation.
        """
        parsed = parse_notation(text)
        return cls(
            min=parsed.min,
            max=parsed.max,
            min_exclusive=parsed.min_exclusive,
            max_exclusive=parsed.max_exclusive,
        )

    def wrap(self, value: T) -> T:
        """Normalize a value that wraps around within ``[lo, hi)``.

        Ignores ``min_exclusive`` and ``max_exclusive``.
        """
        return wrap(self.min, self.max, value)

    def clamp(self, value: T) -> T:
        """Clamp a value to ``[lo, hi]``.

        Ignores ``min_exclusive`` and ``max_exclusive``.
        """
        return clamp(self.min, self.max, value)

    def test(self, value: T) -> bool:
        """Check whether a value lies within the range."""
        return test(self.min, self.max, value, self.min_exclusive, self.max_exclusive)

    def validate(self, value: T) -> T:  # type: ignore[override]
        """Validate that a value lies within the range.

        Returns
        -------
        T
            The value, unchanged.

        Raises
        ------
        OutOfRangeError
            If the value is outside of the range.
        """
        return validate(
            self.min, self.max, value, self.min_exclusive, self.max_exclusive
        )

    def to_string(self) -> str:
        """Render the range in interval notation."""
        return to_string(self.min, self.max, self.min_exclusive, self.max_exclusive)

    def __str__(self) -> str:
        return self.to_string()

    def __contains__(self, value: T) -> bool:
        return self.test(value)
