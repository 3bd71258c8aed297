"""Selector model: fragment kinds, fragment chains, and combined selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Protocol

from cssbuilder.errors import DuplicateKindError, KindOrderError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

DESCENDANT = " "
CHILD = ">"
ADJACENT_SIBLING = "+"
GENERAL_SIBLING = "~"

KNOWN_COMBINATORS = frozenset({
    DESCENDANT,
    CHILD,
    ADJACENT_SIBLING,
    GENERAL_SIBLING,
})


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------


class SelectorKind(Enum):
    """The category of a single selector fragment.

    Members are declared in order rank: a chain may only move forward
    through this sequence.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def prefix(self) -> str:
        return _AFFIXES[self][0]

    @property
    def suffix(self) -> str:
        return _AFFIXES[self][1]

    @property
    def repeatable(self) -> bool:
        """False for kinds that may appear at most once per chain."""
        return self not in _SINGLE_KINDS


_RANKS: dict[SelectorKind, int] = {kind: i for i, kind in enumerate(SelectorKind)}

_AFFIXES: dict[SelectorKind, tuple[str, str]] = {
    SelectorKind.ELEMENT: ("", ""),
    SelectorKind.ID: ("#", ""),
    SelectorKind.CLASS: (".", ""),
    SelectorKind.ATTRIBUTE: ("[", "]"),
    SelectorKind.PSEUDO_CLASS: (":", ""),
    SelectorKind.PSEUDO_ELEMENT: ("::", ""),
}

_SINGLE_KINDS = frozenset({
    SelectorKind.ELEMENT,
    SelectorKind.ID,
    SelectorKind.PSEUDO_ELEMENT,
})


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class Selector(Protocol):
    """Anything that renders to a CSS selector string."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class SelectorFragment:
    """One part of a simple selector chain.

    Attributes:
        kind: Category of this fragment.
        value: Payload rendered verbatim after the kind's prefix.
        previous: The fragment this one was chained onto, if any.
    """

    kind: SelectorKind
    value: str
    previous: SelectorFragment | None = field(default=None, repr=False)

    # --- chaining -----------------------------------------------------------

    def element(self, value: str) -> SelectorFragment:
        return self.append(SelectorKind.ELEMENT, value)

    def id(self, value: str) -> SelectorFragment:
        return self.append(SelectorKind.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return self.append(SelectorKind.CLASS, value)

    def attr(self, value: str) -> SelectorFragment:
        return self.append(SelectorKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return self.append(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return self.append(SelectorKind.PSEUDO_ELEMENT, value)

    def append(self, kind: SelectorKind, value: str) -> SelectorFragment:
        """Return a new fragment of *kind* chained onto this one.

        Raises DuplicateKindError if *kind* may occur only once and this
        fragment already has it (for elements, anywhere in the chain), or
        KindOrderError if *kind* ranks below this fragment's kind.
        """
        if not kind.repeatable and (
            self.kind is kind
            or (kind is SelectorKind.ELEMENT and any(part.kind is kind for part in self))
        ):
            logger.debug("Rejected duplicate %s after %s", kind.value, self.kind.value)
            raise DuplicateKindError(kind, self.kind)
        if self.kind.rank > kind.rank:
            logger.debug("Rejected %s after %s", kind.value, self.kind.value)
            raise KindOrderError(kind, self.kind)
        return SelectorFragment(kind=kind, value=value, previous=self)

    # --- rendering ----------------------------------------------------------

    @property
    def token(self) -> str:
        """This fragment alone, with its prefix and suffix applied."""
        return f"{self.kind.prefix}{self.value}{self.kind.suffix}"

    def parts(self) -> list[SelectorFragment]:
        """Return every fragment of the chain, first to last."""
        chain: list[SelectorFragment] = []
        node: SelectorFragment | None = self
        while node is not None:
            chain.append(node)
            node = node.previous
        chain.reverse()
        return chain

    def __iter__(self) -> Iterator[SelectorFragment]:
        return iter(self.parts())

    def stringify(self) -> str:
        return "".join(part.token for part in self)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    The combinator is rendered as given, surrounded by single spaces, so the
    descendant combinator ``" "`` puts three spaces between the two sides.
    """

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
