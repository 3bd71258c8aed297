"""cssbuilder: compose CSS selector strings from ordered fragments."""

from cssbuilder.builder import (
    attr,
    build,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.errors import DuplicateKindError, KindOrderError, ValidationError
from cssbuilder.model import (
    ADJACENT_SIBLING,
    CHILD,
    DESCENDANT,
    GENERAL_SIBLING,
    KNOWN_COMBINATORS,
    CombinedSelector,
    Selector,
    SelectorFragment,
    SelectorKind,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "attr",
    "build",
    "class_",
    "combine",
    "element",
    "pseudo_class",
    "pseudo_element",
    "ValidationError",
    "DuplicateKindError",
    "KindOrderError",
    "Selector",
    "SelectorFragment",
    "SelectorKind",
    "CombinedSelector",
    "DESCENDANT",
    "CHILD",
    "ADJACENT_SIBLING",
    "GENERAL_SIBLING",
    "KNOWN_COMBINATORS",
]
