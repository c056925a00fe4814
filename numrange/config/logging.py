"""Logging configuration for numrange."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : LogLevel
        Minimum level of records to emit.
    format : str
        Format string for log records.
    file : Path | None
        File to write records to. Records go to stderr when unset.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'WARNING'
    """

    level: LogLevel = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )
    file: Path | None = Field(default=None, description="Log file path")


def configure_logging(config: LoggingConfig, logger_name: str = "numrange") -> None:
    """Configure the numrange logger from a logging configuration.

    Replaces any handlers already installed on the logger. Records still
    propagate to the root logger.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration to apply.
    logger_name : str
        Name of the logger to configure.
    """
    handler: logging.Handler
    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(config.file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))

    logger = logging.getLogger(logger_name)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(config.level)
