"""CLI command: cssbuilder build -- render a selector from parts."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli.tokens import assemble, split_tokens
from cssbuilder.errors import ValidationError


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from kind=value parts and combinators.

    Example: cssbuilder build element=a attr='href$=".png"' pseudo-class=focus
    """
    try:
        chains, combinators = split_tokens(tokens)
    except ValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(assemble(chains, combinators).stringify())
