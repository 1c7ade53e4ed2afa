"""CLI commands: katas selector / katas expand -- text-building katas."""

from __future__ import annotations

import sys

import click

from katas.braces import expand_braces
from katas.errors import KataError
from katas.selector import Selector


@click.command()
@click.option("--element", help="Element (type) name")
@click.option("--id", "id_", help="Id, without the leading #")
@click.option("--class", "classes", multiple=True, help="Class name; may repeat")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression; may repeat")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class; may repeat")
@click.option("--pseudo-element", help="Pseudo-element name")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound CSS selector and print it.

    Parts are applied in CSS order regardless of the order of the options.
    """
    sel = Selector()
    if element:
        sel.with_element(element)
    if id_:
        sel.with_id(id_)
    for name in classes:
        sel.with_class(name)
    for expr in attrs:
        sel.with_attr(expr)
    for name in pseudo_classes:
        sel.with_pseudo_class(name)
    if pseudo_element:
        sel.with_pseudo_element(pseudo_element)
    click.echo(sel.render())


@click.command()
@click.argument("pattern")
def expand(pattern: str) -> None:
    """Print every expansion of a {a,b,...} brace PATTERN, one per line."""
    try:
        expansions = expand_braces(pattern)
    except KataError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for text in expansions:
        click.echo(text)
