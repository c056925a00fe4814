"""Scalar protocol shared by the range operations."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar


class Scalar(Protocol):
    """An ordered numeric scalar supporting the arithmetic ranges need.

    Satisfied by ``int``, ``float``, ``decimal.Decimal``,
    ``fractions.Fraction`` and every NumPy integer and floating scalar.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mod__(self, other: Any, /) -> Any: ...


S = TypeVar("S", bound=Scalar)
