"""Error hierarchy shared by all katas."""
from __future__ import annotations


class KataError(Exception):
    """Base error for all katas errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Selector construction errors
# ---------------------------------------------------------------------------


class OrderError(KataError):
    """A selector category was populated after a later category."""

    def __init__(self, category: str, conflicts: list[str]) -> None:
        super().__init__(
            f"Cannot add {category} after {', '.join(conflicts)}: "
            "selector parts must follow the order element, id, class, "
            "attribute, pseudo-class, pseudo-element"
        )
        self.category = category
        self.conflicts = conflicts


class DuplicateError(KataError):
    """A non-repeatable selector category was populated twice."""

    def __init__(self, category: str) -> None:
        super().__init__(f"Selector {category} is already defined")
        self.category = category


# ---------------------------------------------------------------------------
# Text parsing errors
# ---------------------------------------------------------------------------


class ParseError(KataError):
    """Raised when JSON text or a brace pattern cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
