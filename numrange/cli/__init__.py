"""Command-line interface.

Provides commands for wrapping, clamping, testing and validating values
against ranges given in interval notation or by configured name.
"""

from __future__ import annotations

from numrange.cli.main import cli

__all__ = ["cli"]
