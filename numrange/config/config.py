"""Top-level configuration model for numrange."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from numrange.config.logging import LoggingConfig
from numrange.data.range import Range
from numrange.notation import parse_notation


class NumrangeConfig(BaseModel):
    """Configuration for numrange.

    Parameters
    ----------
    logging : LoggingConfig
        Logging configuration.
    ranges : dict[str, str]
        Named ranges, written in interval notation.

    Examples
    --------
    >>> config = NumrangeConfig(ranges={"angle": "[0,360)"})
    >>> config.get_range("angle").wrap(-90)
    270
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    ranges: dict[str, str] = Field(
        default_factory=dict, description="Named ranges in interval notation"
    )

    @field_validator("ranges")
    @classmethod
    def validate_ranges(cls, ranges: dict[str, str]) -> dict[str, str]:
        """Validate that every named range is valid interval notation.

        Raises
        ------
        ValueError
            If a notation cannot be parsed.
        """
        for name, notation in ranges.items():
            try:
                parse_notation(notation)
            except ValueError as e:
                raise ValueError(f"Invalid range {name!r}: {e}") from e
        return ranges

    def get_range(self, name: str) -> Range[Any]:
        """Return a named range.

        Parameters
        ----------
        name : str
            Name of the range.

        Returns
        -------
        Range
            The range.

        Raises
        ------
        KeyError
            If no range has that name.
        """
        if name not in self.ranges:
            available = ", ".join(sorted(self.ranges)) or "none"
            raise KeyError(f"Unknown range {name!r}. Available ranges: {available}")
        return Range.from_notation(self.ranges[name])
