"""Generic range operations.

Every function accepts its bounds in either order and works for any
ordered numeric scalar type.
"""

from __future__ import annotations

from numrange.core.bounds import maximum, min_max, min_max_exclusive, minimum
from numrange.core.formatting import format_number, to_string
from numrange.core.predicates import test
from numrange.core.transforms import clamp, wrap
from numrange.core.types import Scalar
from numrange.core.validation import validate

__all__ = [
    "Scalar",
    "minimum",
    "maximum",
    "min_max",
    "min_max_exclusive",
    "test",
    "wrap",
    "clamp",
    "validate",
    "to_string",
    "format_number",
]
