"""Configuration loading for numrange.

Configuration is layered: defaults, then a YAML file, then environment
variables, then explicit overrides, each layer winning over the previous.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from numrange.config.config import NumrangeConfig
from numrange.config.defaults import get_default_config
from numrange.config.env import load_from_env

logger = logging.getLogger(__name__)


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load a YAML configuration file.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.

    Returns
    -------
    dict[str, Any]
        The parsed mapping; an empty file gives an empty dict.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the document is not a mapping.
    yaml.YAMLError
        If the file is not valid YAML.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file {path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two configuration dictionaries.

    Nested dictionaries are merged key by key; any other value in
    ``override`` replaces the one in ``base``. Neither input is modified.

    Parameters
    ----------
    base : dict[str, Any]
        Base configuration.
    override : dict[str, Any]
        Configuration whose values take precedence.

    Returns
    -------
    dict[str, Any]
        The merged configuration.

    Examples
    --------
    >>> merge_configs({"logging": {"level": "INFO", "file": None}},
    ...               {"logging": {"level": "DEBUG"}})
    {'logging': {'level': 'DEBUG', 'file': None}}
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Path | str | None = None, **overrides: Any
) -> NumrangeConfig:
    """Load the numrange configuration.

    Parameters
    ----------
    config_path : Path | str | None
        Optional YAML file to load on top of the defaults.
    **overrides : Any
        Top-level values applied last, e.g. ``ranges={...}``.

    Returns
    -------
    NumrangeConfig
        The validated configuration.

    Raises
    ------
    pydantic.ValidationError
        If the combined configuration is invalid.
    """
    data = get_default_config().model_dump()
    if config_path is not None:
        logger.debug("Loading configuration from %s", config_path)
        data = merge_configs(data, load_yaml_file(config_path))
    data = merge_configs(data, load_from_env())
    data = merge_configs(data, overrides)
    return NumrangeConfig(**data)
