"""Facade for starting selectors: one factory method per selector part."""

from __future__ import annotations

from katas.selector.model import CombinedSelector, Renderable, Selector

__all__ = ["SelectorBuilder", "combine", "css_selector_builder"]


class SelectorBuilder:
    """Create fresh selectors and combine existing ones.

    Each factory returns a new :class:`Selector` with its first part set,
    ready for further chaining::

        builder = SelectorBuilder()
        builder.element("a").with_attr('href$=".png"').with_pseudo_class("focus")
    """

    def new(self) -> Selector:
        return Selector()

    def element(self, name: str) -> Selector:
        return Selector().with_element(name)

    def id(self, name: str) -> Selector:
        return Selector().with_id(name)

    def class_(self, name: str) -> Selector:
        return Selector().with_class(name)

    def attr(self, expr: str) -> Selector:
        return Selector().with_attr(expr)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().with_pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().with_pseudo_element(name)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        return CombinedSelector.combine(left, combinator, right)


css_selector_builder = SelectorBuilder()


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors with *combinator*; see :meth:`CombinedSelector.combine`."""
    return CombinedSelector.combine(left, combinator, right)
