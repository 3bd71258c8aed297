"""CLI command: cssbuilder inspect -- display the parts of a selector."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from cssbuilder.cli.tokens import assemble, split_tokens
from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import ValidationError


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--ranks/--no-ranks", default=False, help="Show order rank of each part")
@click.pass_obj
def inspect(config: CssBuilderConfig | None, tokens: tuple[str, ...], ranks: bool) -> None:
    """Build a selector and list each chain's parts.

    Shows every fragment (kind and value) per chain, the combinators
    between chains, and the rendered selector.
    """
    config = replace(config or CssBuilderConfig(), show_ranks=ranks)

    try:
        chains, combinators = split_tokens(tokens)
    except ValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for index, chain in enumerate(chains):
        if index:
            click.echo(f"Combinator: {combinators[index - 1]!r}")
        click.echo(f"Chain {index + 1}: {chain.stringify()}")
        for part in chain:
            parts = [f"  {part.kind.value:<15}", repr(part.value)]
            if config.show_ranks:
                parts.append(f"rank={part.kind.rank}")
            click.echo("  ".join(parts))
    click.echo()
    click.echo(f"Selector: {assemble(chains, combinators).stringify()}")
