"""Selector model: compound and combined CSS selectors.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class parts may repeat; element, id and
pseudo-element may appear at most once. Parts must be added in that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from katas.errors import DuplicateError, OrderError

logger = logging.getLogger(__name__)


class SelectorCategory(StrEnum):
    """Compound selector parts, in the order CSS requires them."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


_ORDER: tuple[SelectorCategory, ...] = tuple(SelectorCategory)

# Categories that may only be set once per selector.
_SINGLE: frozenset[SelectorCategory] = frozenset(
    {SelectorCategory.ELEMENT, SelectorCategory.ID, SelectorCategory.PSEUDO_ELEMENT}
)


class Renderable(Protocol):
    """Anything that can be rendered as selector text."""

    def fragments(self) -> tuple[str, ...]: ...

    def render(self) -> str: ...


class Selector:
    """A mutable compound selector built through chained ``with_*`` calls.

    Every mutator returns the same instance, so calls can be chained::

        Selector().with_id("main").with_class("container").render()
        # '#main.container'

    Element, id and pseudo-element count as set once called, even with an
    empty name.
    """

    __slots__ = ("_parts",)

    _parts: dict[SelectorCategory, list[str]]

    def __init__(self) -> None:
        self._parts = {category: [] for category in _ORDER}

    # --- mutators -------------------------------------------------------------

    def with_element(self, name: str) -> Selector:
        return self._add(SelectorCategory.ELEMENT, name)

    def with_id(self, name: str) -> Selector:
        return self._add(SelectorCategory.ID, f"#{name}")

    def with_class(self, name: str) -> Selector:
        return self._add(SelectorCategory.CLASS, f".{name}")

    def with_attr(self, expr: str) -> Selector:
        return self._add(SelectorCategory.ATTRIBUTE, f"[{expr}]")

    def with_pseudo_class(self, name: str) -> Selector:
        return self._add(SelectorCategory.PSEUDO_CLASS, f":{name}")

    def with_pseudo_element(self, name: str) -> Selector:
        return self._add(SelectorCategory.PSEUDO_ELEMENT, f"::{name}")

    def _add(self, category: SelectorCategory, fragment: str) -> Selector:
        if category in _SINGLE and self._parts[category]:
            logger.debug("Rejected %r: %s already set", fragment, category)
            raise DuplicateError(category.value)
        later = _ORDER[_ORDER.index(category) + 1 :]
        conflicts = [c.value for c in later if self._parts[c]]
        if conflicts:
            logger.debug("Rejected %r: %s already set", fragment, ", ".join(conflicts))
            raise OrderError(category.value, conflicts)
        self._parts[category].append(fragment)
        return self

    # --- rendering ------------------------------------------------------------

    def fragments(self) -> tuple[str, ...]:
        """Return all fragments in category order."""
        return tuple(fragment for category in _ORDER for fragment in self._parts[category])

    def render(self) -> str:
        return "".join(self.fragments())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator. Immutable once built."""

    parts: tuple[str, ...]

    @classmethod
    def combine(
        cls, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Join *left* and *right* with ``" <combinator> "``.

        The combinator is not validated; conventionally it is one of
        ``" "``, ``"+"``, ``"~"`` or ``">"``.
        """
        return cls(parts=(*left.fragments(), f" {combinator} ", *right.fragments()))

    def fragments(self) -> tuple[str, ...]:
        return self.parts

    def render(self) -> str:
        return "".join(self.parts)

    def __str__(self) -> str:
        return self.render()
