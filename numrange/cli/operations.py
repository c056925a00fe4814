"""Range operation commands for numrange CLI.

Each command takes a RANGE (notation or configured name) and, except for
``show``, a VALUE to apply the operation to.
"""

from __future__ import annotations

import click

from numrange.cli.utils import NUMBER, print_error, print_value, resolve_range
from numrange.core import format_number
from numrange.errors import NotationError, OutOfRangeError


@click.command()
@click.argument("range_spec", metavar="RANGE")
@click.argument("value", type=NUMBER)
@click.pass_context
def wrap(ctx: click.Context, range_spec: str, value: int | float) -> None:
    """Wrap VALUE around into RANGE.

    The range is treated as [lo,hi) whatever brackets it is written with.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    range_spec : str
        Range notation or configured range name.
    value : int | float
        Value to wrap.

    Examples
    --------
    $ numrange wrap "[0,360)" 370
    10
    """
    try:
        interval = resolve_range(ctx, range_spec)
    except NotationError as e:
        print_error(str(e))
        ctx.exit(1)
    print_value(format_number(interval.wrap(value)))


@click.command()
@click.argument("range_spec", metavar="RANGE")
@click.argument("value", type=NUMBER)
@click.pass_context
def clamp(ctx: click.Context, range_spec: str, value: int | float) -> None:
    """Clamp VALUE into RANGE.

    The range is treated as [lo,hi] whatever brackets it is written with.

    Examples
    --------
    $ numrange clamp percent 120
    100
    """
    try:
        interval = resolve_range(ctx, range_spec)
    except NotationError as e:
        print_error(str(e))
        ctx.exit(1)
    print_value(format_number(interval.clamp(value)))


@click.command()
@click.argument("range_spec", metavar="RANGE")
@click.argument("value", type=NUMBER)
@click.pass_context
def test(ctx: click.Context, range_spec: str, value: int | float) -> None:
    """Print whether VALUE lies within RANGE.

    Examples
    --------
    $ numrange test "(0,100]" 0
    false
    """
    try:
        interval = resolve_range(ctx, range_spec)
    except NotationError as e:
        print_error(str(e))
        ctx.exit(1)
    print_value("true" if interval.test(value) else "false")


@click.command()
@click.argument("range_spec", metavar="RANGE")
@click.argument("value", type=NUMBER)
@click.pass_context
def validate(ctx: click.Context, range_spec: str, value: int | float) -> None:
    """Print VALUE if it lies within RANGE, fail otherwise.

    Exits with status 1 when the value is outside of the range.

    Examples
    --------
    $ numrange validate "[0,100]" 101
    ✗ 101 is outside of range [0,100]
    """
    try:
        interval = resolve_range(ctx, range_spec)
        print_value(format_number(interval.validate(value)))
    except (NotationError, OutOfRangeError) as e:
        print_error(str(e))
        ctx.exit(1)


@click.command()
@click.argument("range_spec", metavar="RANGE")
@click.pass_context
def show(ctx: click.Context, range_spec: str) -> None:
    """Print RANGE in canonical interval notation.

    Examples
    --------
    $ numrange show "(100,0]"
    [0,100)
    """
    try:
        interval = resolve_range(ctx, range_spec)
    except NotationError as e:
        print_error(str(e))
        ctx.exit(1)
    print_value(interval.to_string())
