from typing import Union

from .fragments import FragmentKind, to_fragment_kind
from .selector import Combinator, CombinedSelector, Selector

Buildable = Union[Selector, CombinedSelector]

class CssSelectorBuilder:
    """Entry point for building CSS selectors.

    Each fragment method starts a new compound selector; chain further
    fragment calls on the returned node and call ``render()`` at the end::

        css_selector_builder.element("div").id("main").class_("container").render()
        # 'div#main.container'
    """

    def start(self, kind: Union[FragmentKind, str], value: str) -> Selector:
        """Start a new selector with a single fragment of ``kind``."""
        return Selector(to_fragment_kind(kind), value)

    def element(self, value: str) -> Selector:
        return self.start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.start(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.start(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.start(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: Buildable,
        combinator: Union[Combinator, str],
        right: Buildable
    ) -> CombinedSelector:
        """
        Join two selectors with a combinator.

        Args:
            left: Selector on the left of the combinator
            combinator: Combinator symbol, e.g. ' ', '>', '+', '~'
            right: Selector on the right of the combinator

        Returns:
            CombinedSelector rendering as ``left + ' ' + combinator + ' ' + right``
        """
        return CombinedSelector(left, combinator, right)

css_selector_builder = CssSelectorBuilder()
