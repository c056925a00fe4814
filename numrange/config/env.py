"""Environment variable overrides for numrange configuration."""

from __future__ import annotations

import os
from typing import Any

ENV_PREFIX = "NUMRANGE_"


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect configuration overrides from environment variables.

    Double underscores separate nesting levels, so
    ``NUMRANGE_LOGGING__LEVEL=DEBUG`` becomes
    ``{"logging": {"level": "DEBUG"}}``. Keys are lower-cased; values are
    kept as strings for pydantic to convert.

    Parameters
    ----------
    prefix : str
        Prefix identifying the relevant variables.

    Returns
    -------
    dict[str, Any]
        Nested override dictionary.

    Examples
    --------
    >>> import os
    >>> os.environ["NUMRANGE_RANGES__ANGLE"] = "[0,360)"
    >>> load_from_env()["ranges"]["angle"]
    '[0,360)'
    """
    overrides: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix) or key == prefix:
            continue
        path = key[len(prefix) :].lower().split("__")
        target = overrides
        for part in path[:-1]:
            target = target.setdefault(part, {})
        target[path[-1]] = value
    return overrides
