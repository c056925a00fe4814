"""Configuration system for numrange.

Provides configuration models, defaults, and loading from YAML files and
environment variables.
"""

from __future__ import annotations

from numrange.config.config import NumrangeConfig
from numrange.config.defaults import DEFAULT_CONFIG, get_default_config
from numrange.config.env import load_from_env
from numrange.config.loader import load_config, load_yaml_file, merge_configs
from numrange.config.logging import LoggingConfig, configure_logging

__all__ = [
    # Main config
    "NumrangeConfig",
    # Config sections
    "LoggingConfig",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Environment
    "load_from_env",
    # Logging
    "configure_logging",
]
