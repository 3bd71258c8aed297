"""Turn command-line tokens into selectors.

A token is either ``kind=value`` or one of the combinators. Consecutive
``kind=value`` tokens extend the same chain; a combinator closes it and
starts the next one::

    element=div class=main ">" element=p pseudo-class=first-child
"""

from __future__ import annotations

from typing import Sequence

import click

from cssbuilder.builder import build, combine
from cssbuilder.model import KNOWN_COMBINATORS, Selector, SelectorFragment, SelectorKind

_KIND_NAMES: dict[str, SelectorKind] = {kind.value: kind for kind in SelectorKind}
_KIND_NAMES["attr"] = SelectorKind.ATTRIBUTE


def split_tokens(tokens: Sequence[str]) -> tuple[list[SelectorFragment], list[str]]:
    """Build one chain per run of ``kind=value`` tokens.

    Returns the chains and the combinators between them. Raises
    ``click.UsageError`` for malformed tokens; chaining violations propagate
    as :class:`~cssbuilder.errors.ValidationError`.
    """
    chains: list[SelectorFragment] = []
    combinators: list[str] = []
    current: SelectorFragment | None = None

    for token in tokens:
        if token in KNOWN_COMBINATORS:
            if current is None:
                raise click.UsageError(f"Combinator {token!r} must follow a selector part")
            chains.append(current)
            combinators.append(token)
            current = None
            continue

        name, sep, value = token.partition("=")
        kind = _KIND_NAMES.get(name.strip().lower())
        if not sep or kind is None:
            raise click.UsageError(
                f"Expected kind=value or a combinator, got {token!r}"
            )
        if not value:
            raise click.UsageError(f"Empty value in {token!r}")
        current = build(kind, value) if current is None else current.append(kind, value)

    if current is None:
        raise click.UsageError("Expected a selector part after the last combinator")
    chains.append(current)
    return chains, combinators


def assemble(chains: Sequence[SelectorFragment], combinators: Sequence[str]) -> Selector:
    """Join *chains* left to right with *combinators*."""
    selector: Selector = chains[0]
    for combinator, chain in zip(combinators, chains[1:]):
        selector = combine(selector, combinator, chain)
    return selector
