"""Shared helper utilities for line rule implementations."""

from __future__ import annotations

MAX_NAME_LENGTH = 20

# Identifiers that look like calls but are language keywords.
NOT_FUNCTIONS = frozenset(
    {
        "if",
        "while",
        "for",
        "switch",
        "return",
        "throw",
        "catch",
        "sizeof",
        "typeof",
        "delete",
        "new",
    }
)


def truncate_name(name: str, limit: int = MAX_NAME_LENGTH) -> str:
    """Cut ``name`` to ``limit`` characters; no ellipsis is added."""
    if len(name) > limit:
        return name[:limit]
    return name


def is_blank_or_line_comment(text: str) -> bool:
    return not text.strip() or text.lstrip().startswith("//")


def is_likely_not_function(name: str) -> bool:
    return name.lower() in NOT_FUNCTIONS


def is_likely_macro(name: str) -> bool:
    """Return True when every letter of ``name`` is uppercase (``GENERATED_BODY``)."""
    if not name:
        return True
    letters = name.replace("_", "")
    return bool(letters) and all(char.isupper() for char in letters)


__all__ = [
    "MAX_NAME_LENGTH",
    "NOT_FUNCTIONS",
    "is_blank_or_line_comment",
    "is_likely_macro",
    "is_likely_not_function",
    "truncate_name",
]
