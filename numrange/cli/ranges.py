"""Named range listing for numrange CLI."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from numrange.cli.utils import console, get_config, print_info
from numrange.data import Range


@click.command()
@click.pass_context
def ranges(ctx: click.Context) -> None:
    """List the configured named ranges.

    Examples
    --------
    $ numrange ranges
    $ numrange --config ranges.yaml ranges
    """
    config = get_config(ctx)
    if not config.ranges:
        print_info("No named ranges configured")
        return

    table = Table(title="Named Ranges")
    table.add_column("Name", style="cyan")
    table.add_column("Notation", style="yellow")
    table.add_column("Canonical", style="green")

    for name in sorted(config.ranges):
        notation = config.ranges[name]
        canonical = Range.from_notation(notation).to_string()
        table.add_row(escape(name), escape(notation), escape(canonical))

    console.print(table)
