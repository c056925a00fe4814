"""CLI entry point for numrange package.

Allows running via: python -m numrange
"""

from __future__ import annotations

from numrange.cli.main import cli

if __name__ == "__main__":
    cli()
