from enum import Enum
from typing import Dict, FrozenSet, Tuple, Union

from .exceptions import InvalidSelectorError

class FragmentKind(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the CSS arrangement order."""
        return FRAGMENT_ORDER.index(self)

    def kinds_after(self) -> FrozenSet["FragmentKind"]:
        """Return every kind that must come after this one inside a compound selector."""
        return frozenset(FRAGMENT_ORDER[self.rank + 1:])

# element, id, class, attribute, pseudo-class, pseudo-element
FRAGMENT_ORDER: Tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

FRAGMENT_TEMPLATES: Dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{value}",
    FragmentKind.ID: "#{value}",
    FragmentKind.CLASS: ".{value}",
    FragmentKind.ATTRIBUTE: "[{value}]",
    FragmentKind.PSEUDO_CLASS: ":{value}",
    FragmentKind.PSEUDO_ELEMENT: "::{value}",
}

SINGLE_OCCURRENCE_KINDS: FrozenSet[FragmentKind] = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

def to_fragment_kind(kind: Union[FragmentKind, str]) -> FragmentKind:
    """Convert a kind given as a FragmentKind or its string value."""
    if isinstance(kind, FragmentKind):
        return kind
    try:
        return FragmentKind(kind)
    except ValueError:
        raise InvalidSelectorError(f"Unknown fragment kind: {kind!r}") from None

def render_fragment(kind: FragmentKind, value: str) -> str:
    """
    Render a single fragment to its textual form.

    Args:
        kind: The fragment kind selecting the template
        value: Raw text supplied by the caller, inserted verbatim

    Returns:
        The templated fragment, e.g. ``#main`` for an id of ``main``
    """
    return FRAGMENT_TEMPLATES[kind].replace("{value}", str(value))
