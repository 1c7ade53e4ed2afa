from katas.selector.builder import SelectorBuilder, combine, css_selector_builder
from katas.selector.model import CombinedSelector, Renderable, Selector, SelectorCategory

__all__ = [
    "CombinedSelector",
    "Renderable",
    "Selector",
    "SelectorBuilder",
    "SelectorCategory",
    "combine",
    "css_selector_builder",
]
