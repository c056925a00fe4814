"""Shared helpers for numrange CLI commands."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from numrange.config import NumrangeConfig, get_default_config
from numrange.data import Range
from numrange.errors import NotationError
from numrange.notation import parse_number

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_value(text: str) -> None:
    """Print a bare result without markup or highlighting."""
    console.print(text, markup=False, highlight=False)


def get_config(ctx: click.Context) -> NumrangeConfig:
    """Return the configuration stored on the root context."""
    obj = ctx.find_object(dict)
    if obj is None or "config" not in obj:
        return get_default_config()
    config: NumrangeConfig = obj["config"]
    return config


def resolve_range(ctx: click.Context, range_spec: str) -> Range[Any]:
    """Resolve a RANGE argument to a range.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    range_spec : str
        Interval notation such as ``[0,100)``, or the name of a
        configured range.

    Returns
    -------
    Range
        The range.

    Raises
    ------
    NotationError
        If the argument is neither a configured name nor valid notation.
    """
    config = get_config(ctx)
    if range_spec in config.ranges:
        return config.get_range(range_spec)
    return Range.from_notation(range_spec)


class NumberParamType(click.ParamType):
    """Click parameter type for int or float literals."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)):
            return value
        try:
            return parse_number(str(value))
        except NotationError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()
