from katas.braces.expander import BraceExpansion, Group, expand_braces, parse_braces

__all__ = ["BraceExpansion", "Group", "expand_braces", "parse_braces"]
