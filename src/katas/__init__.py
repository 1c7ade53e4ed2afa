"""Katas: a CSS selector builder, JSON helpers and small algorithm puzzles."""
from __future__ import annotations

__version__ = "0.1.0"

from katas.braces import BraceExpansion, expand_braces
from katas.compass import CompassPoint, build_compass_points
from katas.config import KatasConfig, configure_logging
from katas.dominoes import can_form_domino_row
from katas.errors import DuplicateError, KataError, OrderError, ParseError
from katas.objects import Rectangle, from_json, from_serialized, make_rectangle, to_json
from katas.ranges import extract_ranges
from katas.selector import (
    CombinedSelector,
    Selector,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from katas.zigzag import build_zigzag_matrix

__all__ = [
    "BraceExpansion",
    "CombinedSelector",
    "CompassPoint",
    "DuplicateError",
    "KataError",
    "KatasConfig",
    "OrderError",
    "ParseError",
    "Rectangle",
    "Selector",
    "SelectorBuilder",
    "build_compass_points",
    "build_zigzag_matrix",
    "can_form_domino_row",
    "combine",
    "configure_logging",
    "css_selector_builder",
    "expand_braces",
    "extract_ranges",
    "from_json",
    "from_serialized",
    "make_rectangle",
    "to_json",
]
