"""Katas CLI entry point: Click group with one subcommand per kata."""

import click

from katas import __version__
from katas.config import KatasConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="katas")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    help="Logging level (DEBUG, INFO, WARNING, ERROR)",
)
@click.option(
    "--json-indent",
    type=int,
    default=None,
    help="Indent JSON output by this many spaces (default: compact)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, json_indent: int | None) -> None:
    """Katas - CSS selectors, JSON shapes and small algorithm puzzles."""
    config = KatasConfig(log_level=log_level, json_indent=json_indent)
    try:
        configure_logging(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = config


# Import and register subcommands
from katas.cli.selector import expand, selector  # noqa: E402
from katas.cli.puzzles import compass, dominoes, ranges, rectangle, zigzag  # noqa: E402

cli.add_command(selector)
cli.add_command(expand)
cli.add_command(zigzag)
cli.add_command(dominoes)
cli.add_command(ranges)
cli.add_command(compass)
cli.add_command(rectangle)
