"""Main CLI entry point for numrange.

Defines the root command group, loads configuration and sets up logging
before any subcommand runs.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from numrange import __version__
from numrange.cli.operations import clamp, show, test, validate, wrap
from numrange.cli.ranges import ranges
from numrange.cli.utils import print_error
from numrange.config import configure_logging, load_config


@click.group()
@click.version_option(version=__version__, prog_name="numrange")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file with named ranges",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Override the configured logging level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    r"""Interval arithmetic on the command line.

    RANGE arguments are interval notation, where a square bracket includes
    the endpoint and a parenthesis excludes it, or the name of a configured
    range. Put negative values after ``--``.

    \b
    Examples:
        $ numrange wrap "[0,360)" 370
        $ numrange clamp percent 120
        $ numrange validate "(0,1]" -- -0.5
        $ numrange ranges
    """
    ctx.ensure_object(dict)
    overrides = {"logging": {"level": log_level}} if log_level else {}
    try:
        config = load_config(config_path, **overrides)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as e:
        print_error(f"Failed to load configuration: {e}")
        ctx.exit(1)
    configure_logging(config.logging)
    ctx.obj["config"] = config


cli.add_command(wrap)
cli.add_command(clamp)
cli.add_command(test)
cli.add_command(validate)
cli.add_command(show)
cli.add_command(ranges)
