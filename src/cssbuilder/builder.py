"""Selector builder facade.

Each function starts a new chain; the returned fragment carries the same
methods for everything that follows it::

    >>> from cssbuilder import builder
    >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'
    >>> builder.combine(builder.element("div"), "+", builder.element("table")).stringify()
    'div + table'
"""

from __future__ import annotations

from cssbuilder.model import CombinedSelector, Selector, SelectorFragment, SelectorKind

__all__ = [
    "build",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def build(kind: SelectorKind, value: str) -> SelectorFragment:
    """Start a chain with a single fragment of *kind*."""
    return SelectorFragment(kind=kind, value=value)


def element(value: str) -> SelectorFragment:
    return build(SelectorKind.ELEMENT, value)


def id(value: str) -> SelectorFragment:  # noqa: A001
    return build(SelectorKind.ID, value)


def class_(value: str) -> SelectorFragment:
    return build(SelectorKind.CLASS, value)


def attr(value: str) -> SelectorFragment:
    return build(SelectorKind.ATTRIBUTE, value)


def pseudo_class(value: str) -> SelectorFragment:
    return build(SelectorKind.PSEUDO_CLASS, value)


def pseudo_element(value: str) -> SelectorFragment:
    return build(SelectorKind.PSEUDO_ELEMENT, value)


def combine(left: Selector, combinator: str, right: Selector) -> CombinedSelector:
    """Join two selectors with *combinator* (``" "``, ``"+"``, ``"~"`` or ``">"``).

    The combinator is not checked; any string is rendered as given.
    """
    return CombinedSelector(left=left, combinator=combinator, right=right)
