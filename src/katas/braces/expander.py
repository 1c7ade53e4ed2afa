"""Shell-style brace expansion.

``'~/{Downloads,Pictures}/*.{jpg,png}'`` expands to four paths, one per
combination of alternatives. Groups nest, and an empty alternative
(``'jp{e,}g'``) contributes an empty string.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from katas.errors import ParseError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@dataclass(frozen=True)
class Group:
    """A ``{...}`` alternation; each alternative is a sequence of parts."""

    alternatives: tuple[tuple[Part, ...], ...]


Part = Union[str, Group]


class BraceTransformer(Transformer):  # type: ignore[type-arg]
    """Turn a Lark parse tree into a tuple of text and :class:`Group` parts."""

    def start(self, items: list[Token | Group]) -> tuple[Part, ...]:
        return tuple(_as_part(item) for item in items)

    def alternative(self, items: list[Token | Group]) -> tuple[Part, ...]:
        return tuple(_as_part(item) for item in items)

    def group(self, items: list[Token | tuple[Part, ...]]) -> Group:
        # Separator commas arrive as tokens between the alternatives.
        return Group(alternatives=tuple(item for item in items if isinstance(item, tuple)))


def _as_part(item: Token | Group) -> Part:
    if isinstance(item, Group):
        return item
    return str(item)


@functools.cache
def _get_parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_braces(pattern: str) -> tuple[Part, ...]:
    """Parse *pattern* into text and group parts.

    Raises :class:`ParseError` when braces are unbalanced.
    """
    try:
        tree = _get_parser().parse(pattern)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(
            f"Unbalanced braces in pattern {pattern!r}", line=line, column=column
        ) from e
    parts = BraceTransformer().transform(tree)
    logger.debug("Parsed %r into %d part(s)", pattern, len(parts))
    return parts


def _expand_sequence(parts: tuple[Part, ...]) -> Iterator[str]:
    if not parts:
        yield ""
        return
    head, rest = parts[0], parts[1:]
    for prefix in _expand_part(head):
        for suffix in _expand_sequence(rest):
            yield prefix + suffix


def _expand_part(part: Part) -> Iterator[str]:
    if isinstance(part, Group):
        for alternative in part.alternatives:
            yield from _expand_sequence(alternative)
    else:
        yield part


class BraceExpansion:
    """Lazy, restartable sequence of the strings a brace pattern expands to.

    The pattern is parsed once up front; every iteration generates the
    expansions afresh, left-to-right through each group's alternatives.
    """

    __slots__ = ("_parts", "pattern")

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._parts = parse_braces(pattern)

    def __iter__(self) -> Iterator[str]:
        return _expand_sequence(self._parts)

    def __repr__(self) -> str:
        return f"BraceExpansion({self.pattern!r})"


def expand_braces(pattern: str) -> BraceExpansion:
    """Return the expansions of *pattern*; see :class:`BraceExpansion`."""
    return BraceExpansion(pattern)
