"""Exception classes for numrange.

All exceptions raised by the package derive from ``RangeError``. The
concrete errors also derive from ``ValueError`` so that they surface as
validation errors when raised inside pydantic validators.
"""

from __future__ import annotations

from typing import Any


class RangeError(Exception):
    """Base exception for numrange errors."""


class OutOfRangeError(RangeError, ValueError):
    """Raised when a value fails validation against a range.

    Parameters
    ----------
    value : Any
        The rejected value.
    notation : str
        Canonical interval notation of the range, e.g. ``"[0,100)"``.

    Examples
    --------
    >>> error = OutOfRangeError(101, "[0,100]")
    >>> str(error)
    '101 is outside of range [0,100]'
    """

    def __init__(self, value: Any, notation: str) -> None:
        # numrange.core imports this module
        from numrange.core.formatting import format_number  # noqa: PLC0415

        self.value = value
        self.notation = notation
        super().__init__(f"{format_number(value)} is outside of range {notation}")


class NotationError(RangeError, ValueError):
    """Raised when interval notation cannot be parsed.

    Parameters
    ----------
    message : str
        Error message.
    column : int | None
        Column number (1-indexed) where the error occurred.
    text : str | None
        The text being parsed.
    """

    def __init__(
        self,
        message: str,
        column: int | None = None,
        text: str | None = None,
    ) -> None:
        self.message = message
        self.column = column
        self.text = text
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.message]
        if self.column is not None:
            parts.append(f"at column {self.column}")
        if self.text is not None:
            parts.append(f"in {self.text!r}")
        return " ".join(parts)
