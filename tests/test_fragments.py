import pytest

from css_selector_builder import FragmentKind, FRAGMENT_ORDER, render_fragment

def test_fragment_order():
    assert [kind.value for kind in FRAGMENT_ORDER] == [
        "element", "id", "class", "attribute", "pseudo-class", "pseudo-element"
    ]
    assert FragmentKind.ELEMENT.rank == 0
    assert FragmentKind.PSEUDO_ELEMENT.rank == 5

def test_kinds_after():
    assert FragmentKind.ATTRIBUTE.kinds_after() == {
        FragmentKind.PSEUDO_CLASS,
        FragmentKind.PSEUDO_ELEMENT
    }
    assert FragmentKind.PSEUDO_ELEMENT.kinds_after() == frozenset()

@pytest.mark.parametrize("kind, value, expected", [
    (FragmentKind.ELEMENT, "div", "div"),
    (FragmentKind.ID, "main", "#main"),
    (FragmentKind.CLASS, "container", ".container"),
    (FragmentKind.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
    (FragmentKind.PSEUDO_CLASS, "nth-of-type(even)", ":nth-of-type(even)"),
    (FragmentKind.PSEUDO_ELEMENT, "after", "::after"),
])
def test_render_fragment(kind, value, expected):
    assert render_fragment(kind, value) == expected

def test_render_fragment_keeps_braces():
    assert render_fragment(FragmentKind.ATTRIBUTE, "data-x='{value}'") == "[data-x='{value}']"
