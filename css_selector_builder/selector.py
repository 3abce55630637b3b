from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from .fragments import FragmentKind, render_fragment, to_fragment_kind
from .validators import FragmentValidator

_validator = FragmentValidator()

class Combinator(str, Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

@dataclass(frozen=True)
class Selector:
    """
    One fragment of a compound selector, linked to the fragment it extends.

    Nodes are immutable. Appending returns a new node whose ``previous`` is
    the node it was appended to, so one prefix can be shared by any number
    of independent extensions.
    """
    kind: FragmentKind
    value: str
    previous: Optional["Selector"] = field(default=None, repr=False)

    def __post_init__(self):
        if not isinstance(self.kind, FragmentKind):
            object.__setattr__(self, "kind", to_fragment_kind(self.kind))

        _validator.validate_extension(self.previous, self.kind)

    def append(self, kind: Union[FragmentKind, str], value: str) -> "Selector":
        """
        Return a new selector extending this one with a fragment.

        Args:
            kind: Fragment kind, as a FragmentKind or its string value
            value: Raw fragment text, not checked for CSS syntax

        Returns:
            The new node; this node is left untouched

        Raises:
            DuplicateFragmentError: element, id or pseudo-element repeated
            OrderViolationError: fragment added out of CSS order
        """
        return Selector(to_fragment_kind(kind), value, self)

    def element(self, value: str) -> "Selector":
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "Selector":
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> "Selector":
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> "Selector":
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "Selector":
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "Selector":
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def has_any(self, kinds: Iterable[Union[FragmentKind, str]]) -> bool:
        """Check if this node or any node it extends has one of ``kinds``."""
        kinds = frozenset(to_fragment_kind(kind) for kind in kinds)
        if self.kind in kinds:
            return True
        return self.previous is not None and self.previous.has_any(kinds)

    def fragments(self) -> List[Tuple[FragmentKind, str]]:
        """Return the (kind, value) pairs of the chain, root first."""
        head = self.previous.fragments() if self.previous is not None else []
        return head + [(self.kind, self.value)]

    def render(self) -> str:
        """Render the compound selector, e.g. ``div#main.container``."""
        prefix = self.previous.render() if self.previous is not None else ""
        return prefix + render_fragment(self.kind, self.value)

    def __str__(self) -> str:
        return self.render()

@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, e.g. ``ul > li``."""
    left: Union[Selector, "CombinedSelector"]
    combinator: str
    right: Union[Selector, "CombinedSelector"]

    def __post_init__(self):
        # Combinator members must render as their symbol, not "Combinator.CHILD"
        if isinstance(self.combinator, Combinator):
            object.__setattr__(self, "combinator", self.combinator.value)

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()
