"""CLI commands for the numeric and geometry katas."""

from __future__ import annotations

import sys

import click

from katas.compass import build_compass_points
from katas.config import KatasConfig
from katas.dominoes import can_form_domino_row
from katas.objects import make_rectangle, to_json
from katas.ranges import extract_ranges
from katas.zigzag import build_zigzag_matrix


def _parse_tile(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[tuple[int, int]]:
    tiles = []
    for raw in value:
        left, sep, right = raw.partition(":")
        try:
            if not sep:
                raise ValueError(raw)
            tiles.append((int(left), int(right)))
        except ValueError:
            raise click.BadParameter(f"expected a tile like 1:2, got {raw!r}") from None
    return tiles


@click.command()
@click.argument("size", type=int)
def zigzag(size: int) -> None:
    """Print the SIZE x SIZE zig-zag matrix."""
    try:
        matrix = build_zigzag_matrix(size)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    width = len(str(size * size - 1)) if size else 1
    for row in matrix:
        click.echo(" ".join(str(v).rjust(width) for v in row))


@click.command()
@click.argument("tiles", nargs=-1, callback=_parse_tile)
def dominoes(tiles: list[tuple[int, int]]) -> None:
    """Check whether TILES (written 1:2) can be laid in a single row.

    Exits with code 0 if they can, or code 1 if they cannot.
    """
    if can_form_domino_row(tiles):
        click.echo("yes")
        sys.exit(0)
    click.echo("no")
    sys.exit(1)


@click.command()
@click.argument("numbers", nargs=-1, type=int)
def ranges(numbers: tuple[int, ...]) -> None:
    """Compress sorted NUMBERS into range notation, e.g. 0-2,5,7-9."""
    click.echo(extract_ranges(numbers))


@click.command()
def compass() -> None:
    """Print the 32 compass points and their azimuths."""
    for point in build_compass_points():
        click.echo(f"{point.abbreviation:<5} {point.azimuth:7.2f}")


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config: KatasConfig, width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    rect = make_rectangle(width, height)
    click.echo(to_json(rect, indent=config.json_indent))
    click.echo(f"Area: {rect.area():g}")
