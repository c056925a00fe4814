"""Root pytest configuration for numrange package tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def clear_numrange_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove NUMRANGE_* variables so the environment cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith("NUMRANGE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_numrange_logger() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging."""
    logger = logging.getLogger("numrange")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
