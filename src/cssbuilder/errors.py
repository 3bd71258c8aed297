"""Errors raised while chaining selector fragments."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model import SelectorKind


DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class ValidationError(Exception):
    """Raised when a chaining call would produce an invalid selector.

    Attributes:
        kind: The kind that was being appended.
        current: The kind of the fragment the call was made on.
    """

    def __init__(
        self, message: str, kind: SelectorKind, current: SelectorKind
    ) -> None:
        self.kind = kind
        self.current = current
        super().__init__(message)


class DuplicateKindError(ValidationError):
    """Element, id or pseudo-element appended to a chain that already has one."""

    def __init__(self, kind: SelectorKind, current: SelectorKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind, current)


class KindOrderError(ValidationError):
    """A kind appended after a kind of higher order rank."""

    def __init__(self, kind: SelectorKind, current: SelectorKind) -> None:
        super().__init__(ORDER_MESSAGE, kind, current)
