"""numrange - Generic interval arithmetic over numeric scalars.

Wrapping, clamping, membership testing and validation against ranges whose
endpoints may independently be inclusive or exclusive, for every numeric
scalar type from Python ``int`` and ``float`` to fixed-width NumPy scalars.
"""

from __future__ import annotations

from numrange.core import (
    clamp,
    format_number,
    maximum,
    min_max,
    min_max_exclusive,
    minimum,
    test,
    to_string,
    validate,
    wrap,
)
from numrange.data import Range
from numrange.errors import NotationError, OutOfRangeError, RangeError
from numrange.notation import ParsedInterval, parse_notation, parse_number

__version__ = "0.1.0"

__all__ = [
    # Canonicalization
    "min_max",
    "min_max_exclusive",
    "minimum",
    "maximum",
    # Operations
    "wrap",
    "clamp",
    "test",
    "validate",
    "to_string",
    "format_number",
    # Value object
    "Range",
    # Notation
    "ParsedInterval",
    "parse_notation",
    "parse_number",
    # Errors
    "RangeError",
    "OutOfRangeError",
    "NotationError",
]
