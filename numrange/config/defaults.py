"""Default configuration for numrange."""

from __future__ import annotations

from numrange.config.config import NumrangeConfig

DEFAULT_CONFIG = NumrangeConfig(
    ranges={
        "degrees": "[0,360)",
        "percent": "[0,100]",
        "unit": "[0,1]",
        "byte": "[0,256)",
    }
)


def get_default_config() -> NumrangeConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    NumrangeConfig
        A deep copy of the default configuration, safe to modify.
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
